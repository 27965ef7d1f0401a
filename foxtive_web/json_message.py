"""The standard JSON envelope wrapped around every response body."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass
class JsonResponse(Generic[T]):
    """A response payload with its code, outcome, message and creation time."""

    data: T
    success: bool
    message: str | None
    code: str
    timestamp: int

    def to_dict(self) -> dict[str, Any]:
        """Return the envelope as a JSON-ready mapping."""
        return {
            "code": self.code,
            "success": self.success,
            "timestamp": self.timestamp,
            "message": self.message,
            "data": self.data,
        }


def make_json_message(
    data: T, code: str, success: bool, message: str | None = None
) -> JsonResponse[T]:
    """Wrap ``data`` in an envelope stamped with the current Unix time."""
    return JsonResponse(
        data=data,
        success=success,
        message=message,
        code=code,
        timestamp=int(time.time()),
    )