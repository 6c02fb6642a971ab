"""
Dots and boxes analysis core.

Pure-logic package behind the board UI: edge state, per-cell wall counts and
the move recommender.
Modules:
- wall.py, square_walls.py: Wall, SquareWalls value types
- board.py: Board
- recommend.py: three-phase move recommender
- codec.py: JSON form of boards and walls
- config.py: environment defaults
- cli.py: command line front-end
"""
