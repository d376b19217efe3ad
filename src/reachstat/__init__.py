"""reachstat — Monte Carlo connectivity statistics for edge-list graphs."""

__version__ = "0.1.0"
