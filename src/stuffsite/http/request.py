"""Immutable HTTP request.

Only the request line is exposed. Route handlers return literal bodies,
so headers and the request body are never read.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable view of an ASGI HTTP scope's request line."""

    method: str
    path: str
    query_string: bytes = b""

    @property
    def is_head(self) -> bool:
        return self.method == "HEAD"

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI scope."""
        return cls(
            method=scope["method"].upper(),
            path=scope["path"],
            query_string=scope.get("query_string", b""),
        )
