"""
Merge2048 core Python package.

This package contains the board simulation engine: pure state transitions
with no I/O, shared by the Flask app, the CLI and the tests.
Modules:
- tile.py: Tile, Coord
- rotation.py: quarter-turn coordinate mapping and direction handling
- spawn.py: free-cell lookup and random tile creation
- moves.py: the move-up resolution pass
- board.py: Board
- snapshot.py: BoardSnapshot, TileView
"""
