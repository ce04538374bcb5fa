import sys
import time
from typing import Callable, Optional

from .config import CalculatorConfig, MatrixOperation
from .matrix_errors import SparseCalcError, InvalidSelectionError
from .sparse_matrix import SparseMatrix



class MatrixCalculator:
    """
    Interactive front end for SparseMatrix arithmetic.

    Loads two matrices from disk, applies one operation chosen from the configured
    menu, and writes the result back out in the same text format.
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        """
        Initialize the MatrixCalculator

        Args:
            config: CalculatorConfig object defining the operation menu
        """
        self.config = config if config is not None else CalculatorConfig()
        self.config.validate()

    def menu(self) -> str:
        lines = ["Available operations:"]
        for code, op in self.config.operations.items():
            lines.append(f"{code}: {op.display_name}")
        return "\n".join(lines)

    def select_operation(self, choice: str) -> MatrixOperation:
        """
        Resolve a user choice, either a menu code ('1') or an operation name ('add').

        Raises:
            InvalidSelectionError: If the choice matches nothing in the menu
        """
        choice = choice.strip()
        if choice in self.config.operations:
            return self.config.operations[choice]
        for op in self.config.operations.values():
            if op.name == choice:
                return op
        raise InvalidSelectionError(choice, list(self.config.operations.keys()))

    def apply(self, operation: MatrixOperation, left: SparseMatrix, right: SparseMatrix) -> SparseMatrix:
        return getattr(left, operation.name)(right)

    def calculate(self, first_path: str, second_path: str, choice: str, output_path: str) -> SparseMatrix:
        """
        Load both operands, apply the chosen operation and save the result.

        The choice is resolved before anything is read so that a bad selection fails
        without touching the filesystem.

        Returns:
            The result matrix, also written to output_path
        """
        operation = self.select_operation(choice)

        st = time.time()
        left = SparseMatrix.from_file(first_path)
        right = SparseMatrix.from_file(second_path)
        print(f"Loaded {first_path} ({left.rows}x{left.cols}, {len(left)} entries) and {second_path} ({right.rows}x{right.cols}, {len(right)} entries)")
        print(f"  took: {time.time() - st} seconds")

        st = time.time()
        result = self.apply(operation, left, right)
        print(f"Output of {operation.display_name}: {result.rows}x{result.cols}, {len(result)} entries")
        print(f"  took: {time.time() - st} seconds")

        result.save_to_file(output_path)
        print(f"Output file saved to {output_path}")
        return result

    def run(self, input_fn: Callable[[str], str] = input) -> bool:
        """
        Prompt for two input files, an operation and an output file, then compute.

        Failures are printed to stderr instead of raised.

        Args:
            input_fn: Prompt function, replaceable for scripted use

        Returns:
            True if the result was written, False if an error was reported
        """
        print(self.menu())
        try:
            first_path = input_fn("Enter the file path for the first matrix: ").strip()
            left = SparseMatrix.from_file(first_path)
            print("First matrix loading........")

            second_path = input_fn("Enter the file path for the second matrix: ").strip()
            right = SparseMatrix.from_file(second_path)
            print("Second matrix loading.......")

            codes = ", ".join(self.config.operations.keys())
            operation = self.select_operation(input_fn(f"Choose an operation ({codes}): "))

            result = self.apply(operation, left, right)
            print(f"Output of {operation.display_name}........")

            output_path = input_fn("Enter the file path to save the result: ").strip()
            result.save_to_file(output_path)
            print(f"Output file saved to {output_path}")
        except SparseCalcError as e:
            print(f"Error: {e}", file=sys.stderr)
            return False
        return True


def main() -> int:
    calculator = MatrixCalculator()
    return 0 if calculator.run() else 1


if __name__ == "__main__":
    sys.exit(main())
