from __future__ import annotations

from typing import List, Optional


class InvalidInput(ValueError):
    """Raised when an input record or configuration violates its constraints."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors: List[str] = list(errors) if errors else [message]
