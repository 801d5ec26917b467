"""chessrules — a chess rules engine: legality, check detection, FEN and SAN."""

__version__ = "0.1.0"
