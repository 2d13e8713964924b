"""Shared type aliases used across stuffsite modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler: user-defined function returning a response value
Handler: TypeAlias = Callable[..., Any]

# Error handler: receives (request, error?) and returns a response value
ErrorHandler: TypeAlias = Callable[..., Any]

# Lifespan hook: sync or async, no arguments
Hook: TypeAlias = Callable[[], Any]
