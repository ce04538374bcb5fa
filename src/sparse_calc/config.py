from typing import Dict, Literal
from dataclasses import dataclass, field


@dataclass(frozen=True)
class MatrixOperation:
    """A menu entry: the SparseMatrix method to call and the name shown to the user."""

    name: Literal['add', 'subtract', 'multiply']
    """SparseMatrix method implementing the operation."""

    display_name: str
    """Human readable name, e.g. 'addition'."""


def default_operations() -> Dict[str, MatrixOperation]:
    return {
        '1': MatrixOperation('add', 'addition'),
        '2': MatrixOperation('subtract', 'subtraction'),
        '3': MatrixOperation('multiply', 'multiplication'),
    }


@dataclass
class CalculatorConfig:
    """
    Configuration for the matrix calculator.

    Holds the operation menu offered to the user, keyed by the code typed to select it.
    """

    operations: Dict[str, MatrixOperation] = field(default_factory=default_operations)
    """Mapping from selection code to operation. A choice may also be given as the operation name."""

    def validate(self) -> None:
        """Validate configuration parameters."""
        OPERATION_NAMES = ['add', 'subtract', 'multiply']

        if len(self.operations) == 0:
            raise ValueError("operations cannot be empty")
        for code, op in self.operations.items():
            if op.name not in OPERATION_NAMES:
                raise ValueError(f"operation '{code}' must be one of: {OPERATION_NAMES}, got '{op.name}'")
