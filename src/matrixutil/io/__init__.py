from .matrix_file import load_matrix, parse_matrix, read_matrix, write_matrix

__all__ = ["load_matrix", "parse_matrix", "read_matrix", "write_matrix"]
