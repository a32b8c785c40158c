"""QUITANDA

Category management core for a sales catalog. It lists, retrieves, creates,
updates and soft-deletes product categories, and exposes a public read path
restricted to active categories.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
