# io/matrix_file.py
"""Load and save matrices as JSON, CSV or TSV files."""

from __future__ import annotations

import json
import os
from functools import partial
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

import pandas as pd
from pydantic import BaseModel, Field, StrictFloat, StrictInt, ValidationError, model_validator

from matrixutil.errors import MatrixFileError
from matrixutil.logging import get_logger

logger = get_logger(__file__)

PathLike = Union[str, os.PathLike]


class MatrixPayload(BaseModel):
    """A non-empty rectangular grid of numbers."""

    rows: List[List[Union[StrictInt, StrictFloat]]] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _validate_rows(self) -> "MatrixPayload":
        width = len(self.rows[0])
        if width == 0:
            raise ValueError("rows must not be empty")
        for index, row in enumerate(self.rows):
            if len(row) != width:
                raise ValueError(f"row {index} has {len(row)} values, expected {width}")
        return self


def _validate(data, source: str) -> List[List[Union[int, float]]]:
    try:
        payload = MatrixPayload.model_validate({"rows": data})
    except ValidationError as exc:
        raise MatrixFileError(f"Invalid matrix in {source}: {exc}") from exc
    return payload.rows


def get_reader(file: str, **kwargs) -> Optional[Callable[..., pd.DataFrame]]:
    if file.endswith(".tsv"):
        return partial(pd.read_table, header=None, **kwargs)
    elif file.endswith(".csv"):
        return partial(pd.read_csv, header=None, **kwargs)
    return None


def parse_matrix(text: str, source: str = "<literal>") -> List[List[Union[int, float]]]:
    """Parse a JSON nested-list literal such as ``"[[1, 2], [3, 4]]"``."""

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MatrixFileError(f"Could not parse matrix from {source}: {exc}") from exc
    return _validate(data, source)


def read_matrix(path: PathLike) -> List[List[Union[int, float]]]:
    """Read a matrix from a ``.json``, ``.csv`` or ``.tsv`` file."""

    file = str(path)
    if file.endswith(".json"):
        try:
            text = Path(file).read_text(encoding="utf-8")
        except OSError as exc:
            raise MatrixFileError(f"Could not read {file}: {exc}") from exc
        return parse_matrix(text, source=file)

    reader = get_reader(file)
    if reader is None:
        logger.error("do not know how to read file: %s", file)
        raise MatrixFileError(f"Unsupported matrix file type: {file}")

    try:
        df = reader(file)
    except (OSError, pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        raise MatrixFileError(f"Could not read {file}: {exc}") from exc

    if df.isna().to_numpy().any():
        raise MatrixFileError(f"Missing or ragged values in {file}")

    logger.debug("read %dx%d matrix from %s", df.shape[0], df.shape[1], file)
    return _validate(df.to_numpy().tolist(), file)


def load_matrix(source: str) -> List[List[Union[int, float]]]:
    """Load from ``source`` if it names an existing file, else parse it as JSON."""

    if os.path.isfile(source):
        return read_matrix(source)
    return parse_matrix(source)


def write_matrix(m: Sequence[Sequence[float]], path: PathLike) -> Path:
    """Write ``m`` to ``path``; the suffix selects JSON, CSV or TSV."""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    if target.suffix == ".json":
        with target.open("w", encoding="utf-8") as handle:
            json.dump([list(row) for row in m], handle)
            handle.write("\n")
    elif target.suffix in {".csv", ".tsv"}:
        sep = "\t" if target.suffix == ".tsv" else ","
        pd.DataFrame([list(row) for row in m]).to_csv(target, sep=sep, header=False, index=False)
    else:
        raise MatrixFileError(f"Unsupported matrix file type: {target}")
    logger.debug("wrote matrix to %s", target)
    return target


__all__ = [
    "MatrixPayload",
    "get_reader",
    "parse_matrix",
    "read_matrix",
    "load_matrix",
    "write_matrix",
]
