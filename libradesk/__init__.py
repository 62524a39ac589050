"""Console library management: accounts, book catalogue, loan records and librarian tools."""

__version__ = "0.1.0"
__all__ = ["__version__"]