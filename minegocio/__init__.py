"""Console point-of-sale: brands, products, payment methods, sales and reports."""

__version__ = "0.1.0"
__all__ = ["store", "reports", "cli"]