from .logging import get_configured_level, get_logger, logger_name, reset_logger

__all__ = ["get_logger", "reset_logger", "get_configured_level", "logger_name"]
