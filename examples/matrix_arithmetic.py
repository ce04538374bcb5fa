import os
import sys
import numpy as np

# Add the src directory to Python path to import local sparse_calc
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))


from sparse_calc import SparseMatrix, SparseCalcError



def load_data() -> tuple[SparseMatrix, SparseMatrix]:
    # reuse the small matrices shipped with the tests
    data_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', 'tests', 'data')
    a = SparseMatrix.from_file(os.path.join(data_dir, 'matrix_a.txt'))
    b = SparseMatrix.from_file(os.path.join(data_dir, 'matrix_b.txt'))
    return a, b


def matrix_arithmetic(output_dir: str = './results'):
    a, b = load_data()
    print(f"a: {a.rows}x{a.cols}, {len(a)} entries")
    print(f"b: {b.rows}x{b.cols}, {len(b)} entries")

    product = a @ b
    print("a @ b:")
    print(product.to_string())

    # cross check against numpy
    assert np.array_equal(product.to_dense(), a.to_dense() @ b.to_dense())

    try:
        a + b
    except SparseCalcError as e:
        print(f"a + b not defined: {e}")

    os.makedirs(output_dir, exist_ok=True)
    output_file = os.path.join(output_dir, 'product.txt')
    product.save_to_file(output_file)
    print(f"Output file saved to {output_file}")

    print(product.to_frame())


if __name__ == "__main__":

    matrix_arithmetic()
