"""Sweet Shop - in-memory inventory manager for a retail sweet shop."""

__version__ = "0.1.0"
