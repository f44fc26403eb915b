"""Console library manager for books and publications: catalogue, loans, returns."""

__version__ = "1.0.0"