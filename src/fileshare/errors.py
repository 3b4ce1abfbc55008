"""Errors raised when an embedding application rejects its startup settings."""
from typing import List


class StartupConfigError(ValueError):
    """One or more GOKAPI_* variables resolved to an invalid sentinel."""

    def __init__(self, invalid_fields: List[str]):
        self.invalid_fields = list(invalid_fields)
        super().__init__(f"Invalid value for: {', '.join(self.invalid_fields)}")
