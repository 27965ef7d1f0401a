"""Plain (non-file) form fields from a multipart body."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeVar

T = TypeVar("T")


@dataclass
class DataInput:
    """A named text value submitted in a multipart form."""

    name: str = ""
    value: str = ""

    def get(self, converter: Callable[[str], T]) -> T:
        """Convert the value with ``converter``; its errors propagate unchanged."""
        return converter(self.value)