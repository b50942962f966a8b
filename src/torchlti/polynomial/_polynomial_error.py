class PolynomialError(Exception):
    """Base exception for Laurent polynomial operations."""

    pass
