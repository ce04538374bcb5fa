from typing import Iterable, Iterator

from .constants import HEADER_VALUE_OFFSET, HEADER_VALUE_PATTERN, ELEMENT_PATTERN
from .matrix_errors import MatrixNotFoundError, MatrixFormatError, MatrixWriteError
from .sparse_matrix import SparseMatrix


def _read_header(lines: Iterator[str], label: str) -> int:
    line = next(lines, None)
    if line is None:
        raise MatrixFormatError("", f"Missing {label} header")
    line = line.rstrip('\r\n')
    if ELEMENT_PATTERN.fullmatch(line):
        # the leading digits of an element line would otherwise pass as a header value
        raise MatrixFormatError(line, f"Missing {label} header")
    match = HEADER_VALUE_PATTERN.match(line, HEADER_VALUE_OFFSET)
    if match is None:
        raise MatrixFormatError(line, f"Invalid {label} header")
    return int(match.group(1))


def parse_matrix_lines(lines: Iterable[str]) -> SparseMatrix:
    """
    Parse the rows=/cols= text format into a SparseMatrix.

    The first two lines are the row and column headers; the leading integer found at a
    fixed offset is their value, so the label itself is not checked and anything after
    the digits is ignored. Every following non-blank line
    must be a (row, col, value) element. Elements are applied in order, so a repeated
    coordinate keeps its last value.

    Args:
        lines: The lines of the document, with or without trailing newlines

    Returns:
        The parsed matrix

    Raises:
        MatrixFormatError: On a missing or non-integer header, or on any malformed element line
    """
    lines = iter(lines)
    total_rows = _read_header(lines, "rows")
    total_cols = _read_header(lines, "cols")

    sparse_matrix = SparseMatrix(total_rows, total_cols)

    for line in lines:
        line = line.rstrip('\r\n')
        if not line.strip():
            continue

        match = ELEMENT_PATTERN.fullmatch(line)
        if match is None:
            # a single bad line invalidates the whole document
            raise MatrixFormatError(line)
        row, col, value = (int(g) for g in match.groups())
        sparse_matrix.set_element(row, col, value)

    return sparse_matrix


def load_matrix(fp: str) -> SparseMatrix:
    try:
        f = open(fp, 'r', encoding='utf-8')
    except OSError as e:
        raise MatrixNotFoundError(fp) from e
    with f:
        try:
            return parse_matrix_lines(f)
        except UnicodeDecodeError as e:
            raise MatrixFormatError(fp, "File is not valid UTF-8 text") from e


def save_matrix(matrix: SparseMatrix, fp: str) -> None:
    try:
        f = open(fp, 'w', encoding='utf-8')
    except OSError as e:
        raise MatrixWriteError(fp) from e
    with f:
        f.write(matrix.to_string())
