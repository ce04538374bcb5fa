import os
import sys
import pytest

# Add the src directory to Python path to import local sparse_calc
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from sparse_calc import (SparseMatrix, load_matrix, save_matrix, parse_matrix_lines,
                         MatrixFormatError, MatrixNotFoundError, MatrixWriteError, SparseCalcError)
from test_utils import data_path, write_matrix_file, validate_matrix


class TestParse:

    def test_load_data_file(self):
        m = SparseMatrix.from_file(data_path('matrix_a.txt'))
        validate_matrix(m, {(0, 0): 1, (0, 2): 2, (1, 1): 3}, (2, 3))

    def test_parse_lines_without_newlines(self):
        m = parse_matrix_lines(["rows=3", "cols=4", "(2, 3, -9)"])
        validate_matrix(m, {(2, 3): -9}, (3, 4))

    def test_blank_lines_are_skipped(self):
        m = parse_matrix_lines(["rows=2\n", "cols=2\n", "\n", "(0, 0, 1)\n", "\n", "\n", "(1, 1, 2)\n"])
        assert m.items() == [((0, 0), 1), ((1, 1), 2)]

    def test_duplicate_coordinates_last_wins(self):
        m = parse_matrix_lines(["rows=2", "cols=2", "(0, 1, 5)", "(0, 1, 6)"])
        assert m.get_element(0, 1) == 6
        assert len(m) == 1

    def test_header_value_read_from_fixed_offset(self):
        # the label text is not checked, only its length
        m = parse_matrix_lines(["ROWS:7", "COLS:8"])
        assert m.shape == (7, 8)

    def test_elements_outside_header_expand_dimensions(self):
        m = parse_matrix_lines(["rows=1", "cols=1", "(4, 2, 1)"])
        assert m.shape == (5, 3)

    def test_explicit_zero_entries_are_kept(self):
        m = parse_matrix_lines(["rows=2", "cols=2", "(1, 1, 0)"])
        assert (1, 1) in m

    @pytest.mark.parametrize("bad_line", ["(1, 2, x)", "(1, 2)", "1, 2, 3", "(-1, 2, 3)", "(1, 2, 3) trailing", "(1; 2; 3)"])
    def test_malformed_element_line(self, bad_line):
        with pytest.raises(MatrixFormatError) as exc_info:
            parse_matrix_lines(["rows=3", "cols=3", "(0, 0, 1)", bad_line, "(2, 2, 2)"])
        assert exc_info.value.line == bad_line
        assert bad_line in str(exc_info.value)

    def test_missing_rows_header(self):
        with pytest.raises(MatrixFormatError):
            parse_matrix_lines(["(0, 0, 1)", "(1, 1, 2)"])

    def test_non_integer_header(self):
        with pytest.raises(MatrixFormatError) as exc_info:
            parse_matrix_lines(["rows=abc", "cols=3"])
        assert exc_info.value.line == "rows=abc"

    @pytest.mark.parametrize("header, shape", [(["rows=3x", "cols=1_0"], (3, 1)),
                                               (["rows=3 ", "cols=12abc"], (3, 12)),
                                               (["rows= 4", "cols=+2"], (4, 2)),
                                               (["rows=-2", "cols=0"], (-2, 0))])
    def test_header_reads_leading_integer(self, header, shape):
        assert parse_matrix_lines(header).shape == shape

    def test_header_rejects_non_ascii_digits(self):
        with pytest.raises(MatrixFormatError) as exc_info:
            parse_matrix_lines(["rows=٣", "cols=2"])
        assert exc_info.value.line == "rows=٣"

    def test_element_line_in_place_of_header(self):
        with pytest.raises(MatrixFormatError) as exc_info:
            parse_matrix_lines(["cols=3", "(0, 0, 1)"])
        assert exc_info.value.line == "(0, 0, 1)"

    def test_element_rejects_non_ascii_digits(self):
        with pytest.raises(MatrixFormatError):
            parse_matrix_lines(["rows=2", "cols=2", "(٣, 0, 1)"])

    def test_file_not_utf8(self, tmp_path):
        fp = os.path.join(str(tmp_path), 'binary.txt')
        with open(fp, 'wb') as f:
            f.write(b"rows=2\ncols=2\n(0, 0, \xff\xfe)\n")
        with pytest.raises(MatrixFormatError) as exc_info:
            load_matrix(fp)
        assert exc_info.value.line == fp
        assert isinstance(exc_info.value, SparseCalcError)

    def test_empty_document(self):
        with pytest.raises(MatrixFormatError):
            parse_matrix_lines([])

    def test_malformed_file(self, tmp_path):
        fp = write_matrix_file(tmp_path, 'bad.txt', "rows=2\ncols=2\n(1, 2, x)\n")
        with pytest.raises(MatrixFormatError) as exc_info:
            SparseMatrix.from_file(fp)
        assert exc_info.value.line == "(1, 2, x)"

    def test_missing_file(self, tmp_path):
        fp = os.path.join(str(tmp_path), 'does_not_exist.txt')
        with pytest.raises(MatrixNotFoundError) as exc_info:
            load_matrix(fp)
        assert exc_info.value.path == fp
        assert fp in str(exc_info.value)
        assert isinstance(exc_info.value, FileNotFoundError)
        assert isinstance(exc_info.value, SparseCalcError)


class TestSerialize:

    def test_to_string(self):
        m = SparseMatrix(3, 3)
        m.set_element(2, 0, -4)
        m.set_element(0, 1, 5)
        m.set_element(1, 1, 0)
        assert m.to_string() == "rows=3\ncols=3\n(0, 1, 5)\n(1, 1, 0)\n(2, 0, -4)\n"
        assert str(m) == m.to_string()

    def test_empty_to_string(self):
        assert SparseMatrix(0, 0).to_string() == "rows=0\ncols=0\n"

    def test_save_to_file(self, tmp_path):
        m = SparseMatrix.from_file(data_path('matrix_b.txt'))
        fp = os.path.join(str(tmp_path), 'out.txt')
        m.save_to_file(fp)
        with open(fp) as f:
            assert f.read() == "rows=3\ncols=2\n(0, 0, 4)\n(1, 1, 5)\n(2, 0, 6)\n"

    def test_round_trip(self, tmp_path):
        m = SparseMatrix(4, 5)
        m.set_element(3, 4, -11)
        m.set_element(0, 0, 0)
        m.set_element(2, 1, 8)
        fp = os.path.join(str(tmp_path), 'round_trip.txt')
        save_matrix(m, fp)
        loaded = load_matrix(fp)
        assert loaded.shape == m.shape
        for i in range(m.rows):
            for j in range(m.cols):
                assert loaded.get_element(i, j) == m.get_element(i, j)
        assert loaded == m

    def test_round_trip_of_result(self, tmp_path):
        a = SparseMatrix.from_file(data_path('matrix_a.txt'))
        c = SparseMatrix.from_file(data_path('matrix_c.txt'))
        result = a.add(c)
        fp = os.path.join(str(tmp_path), 'sum.txt')
        result.save_to_file(fp)
        assert SparseMatrix.from_file(fp) == result

    def test_unwritable_destination(self, tmp_path):
        fp = os.path.join(str(tmp_path), 'missing_dir', 'out.txt')
        with pytest.raises(MatrixWriteError) as exc_info:
            SparseMatrix(1, 1).save_to_file(fp)
        assert exc_info.value.path == fp
        assert isinstance(exc_info.value, OSError)
