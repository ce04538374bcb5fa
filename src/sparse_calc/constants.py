import re

ROWS_LABEL = "rows="
COLS_LABEL = "cols="

# the header integer always starts here, whatever the label text is
HEADER_VALUE_OFFSET = 5
# leading integer only, anything after it is ignored
HEADER_VALUE_PATTERN = re.compile(r"\s*([+-]?\d+)", re.ASCII)

ELEMENT_PATTERN = re.compile(r"\(\s*(\d+),\s*(\d+),\s*(-?\d+)\s*\)", re.ASCII)
ELEMENT_FORMAT = "({row}, {col}, {value})\n"
