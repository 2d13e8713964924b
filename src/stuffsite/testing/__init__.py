"""Test utilities for stuffsite applications.

    from stuffsite.testing import TestClient
"""

from stuffsite.testing.client import TestClient

__all__ = ["TestClient"]
