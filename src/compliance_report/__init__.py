"""Paginated PDF compliance reports for analyzed architectural plans."""

__version__ = "0.1.0"
