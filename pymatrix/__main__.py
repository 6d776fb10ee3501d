"""
Demonstration entry point: ``python -m pymatrix``.

Combines two small int8 matrices through transpose, addition, a mapped
constant matrix, multiplication and an in-place scalar decrement, then
prints the first row as characters.
"""

import numpy as np

from pymatrix.dense import Matrix, mat


def demo() -> str:
    no = mat("10, 10, 10, 10", dtype=np.int8)
    super_complex = Matrix.alloca(4, 4, dtype=np.int8).mapped(lambda x: x + 2)
    yes = (mat("4; 4; 4; 4", dtype=np.int8).T() + no) * super_complex
    yes += np.int8(-10)
    return ''.join(chr(int(x) & 0xFF) for x in yes[0])


def main() -> None:
    print(demo())


if __name__ == "__main__":
    main()
