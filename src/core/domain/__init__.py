"""
Domain models and value objects.

Contains the error taxonomy and the CheckedResult tagged union.
"""

from src.core.domain.checked_result import CheckedResult
from src.core.domain.errors import InvalidArgumentError, XLError

__all__ = [
    # Errors
    "XLError",
    "InvalidArgumentError",
    # Checked result model
    "CheckedResult",
]
