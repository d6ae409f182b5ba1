"""stylesig - hierarchical style signature matching."""

__version__ = "0.1.0"
