# This file makes sudoku_gen a Python package.
