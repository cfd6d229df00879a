"""Tests for loading and saving matrix files."""

import json

import pytest

from matrixutil.errors import MatrixFileError
from matrixutil.io.matrix_file import (
    MatrixPayload,
    load_matrix,
    parse_matrix,
    read_matrix,
    write_matrix,
)


def test_parse_matrix_keeps_ints_and_floats():
    assert parse_matrix("[[1, 2.5], [3, 4]]") == [[1, 2.5], [3, 4]]


@pytest.mark.parametrize(
    "text",
    ["[[1, 2], [3]]", "[]", "[[]]", '[["a"]]', '[["1"]]', "[[true]]", '[["1", true]]', "not json"],
)
def test_parse_matrix_rejects_invalid_input(text):
    with pytest.raises(MatrixFileError):
        parse_matrix(text)


def test_payload_model_rejects_ragged_rows():
    with pytest.raises(ValueError):
        MatrixPayload(rows=[[1, 2], [3]])


def test_read_json(tmp_path):
    path = tmp_path / "a.json"
    path.write_text(json.dumps([[1, 2], [3, 4]]))
    assert read_matrix(path) == [[1, 2], [3, 4]]


def test_read_csv(tmp_path):
    path = tmp_path / "a.csv"
    path.write_text("1,2,3\n4,5,6\n")
    assert read_matrix(path) == [[1, 2, 3], [4, 5, 6]]


def test_read_tsv_with_floats(tmp_path):
    path = tmp_path / "a.tsv"
    path.write_text("0.5\t-1\n2\t3\n")
    assert read_matrix(path) == [[0.5, -1.0], [2.0, 3.0]]


def test_read_csv_rejects_ragged_rows(tmp_path):
    path = tmp_path / "ragged.csv"
    path.write_text("1,2,3\n4,5\n")
    with pytest.raises(MatrixFileError):
        read_matrix(path)


def test_read_rejects_unknown_suffix(tmp_path):
    path = tmp_path / "a.xlsx"
    path.write_text("")
    with pytest.raises(MatrixFileError):
        read_matrix(path)


def test_read_missing_json_file(tmp_path):
    with pytest.raises(MatrixFileError):
        read_matrix(tmp_path / "missing.json")


def test_load_matrix_prefers_existing_file(tmp_path):
    path = tmp_path / "a.csv"
    path.write_text("7,8\n")
    assert load_matrix(str(path)) == [[7, 8]]
    assert load_matrix("[[7, 8]]") == [[7, 8]]


@pytest.mark.parametrize("suffix", [".json", ".csv", ".tsv"])
def test_write_then_read(tmp_path, suffix):
    matrix = [[1.5, -2.0], [3.25, 4.0]]
    path = write_matrix(matrix, tmp_path / "out" / f"m{suffix}")
    assert read_matrix(path) == matrix


def test_write_rejects_unknown_suffix(tmp_path):
    with pytest.raises(MatrixFileError):
        write_matrix([[1]], tmp_path / "m.txt")


def test_read_csv_rejects_boolean_cells(tmp_path):
    path = tmp_path / "flags.csv"
    path.write_text("true,false\n")
    with pytest.raises(MatrixFileError):
        read_matrix(path)
