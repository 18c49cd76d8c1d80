# Puzzle generation engine: grid helpers, placement checks, filler, remover and the uniqueness oracle.
