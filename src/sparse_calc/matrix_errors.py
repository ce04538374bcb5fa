

class SparseCalcError(Exception):
    """Base class for all sparse_calc errors."""
    pass



class MatrixNotFoundError(SparseCalcError, FileNotFoundError):
    """Raised when a matrix file cannot be opened for reading."""

    def __init__(self, path: str):
        self.path = path
        message = f"File not found: {path}"
        super().__init__(message)


class MatrixFormatError(SparseCalcError, ValueError):
    """Raised when a line of a matrix file cannot be parsed."""

    def __init__(self, line: str, reason: str = "Invalid format in file"):
        self.line = line
        self.reason = reason
        message = f"{reason}: {line}"
        super().__init__(message)


class DimensionMismatchError(SparseCalcError, ValueError):
    """Raised when operand dimensions do not allow the requested operation."""

    def __init__(self, operation: str, left_shape: tuple = None, right_shape: tuple = None):
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape

        if operation == "multiplication":
            message = "Number of columns of first matrix must equal number of rows of second matrix."
        else:
            message = f"Matrices must have the same dimensions for {operation}."
        if left_shape is not None and right_shape is not None:
            message += f" Got {left_shape} and {right_shape}"
        super().__init__(message)


class InvalidSelectionError(SparseCalcError, ValueError):
    """Raised when the chosen operation code does not match any known operation."""

    def __init__(self, choice: str, valid_choices: list = None):
        self.choice = choice
        self.valid_choices = valid_choices
        if valid_choices is None:
            message = f"Invalid operation choice '{choice}'."
        else:
            message = f"Invalid operation choice '{choice}'. Must be one of: {valid_choices}"
        super().__init__(message)


class MatrixWriteError(SparseCalcError, OSError):
    """Raised when the result file cannot be opened for writing."""

    def __init__(self, path: str):
        self.path = path
        message = f"Unable to open file for writing: {path}"
        super().__init__(message)
