from sudoku_gen.main import main

main()
