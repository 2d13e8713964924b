"""Content negotiation — maps return values to Response objects.

isinstance-based dispatch, no magic, fully predictable.
"""

from typing import Any

from stuffsite.http.response import Response


def negotiate(value: Any) -> Response:
    """Convert a route handler's return value to a Response.

    Dispatch order:
    1. ``Response``      -> pass through
    2. ``str``           -> 200, text/html
    3. ``bytes``         -> 200, application/octet-stream
    4. ``(value, int)``  -> negotiate value, override status
    """
    match value:
        case Response():
            return value
        case str():
            return Response(body=value)
        case bytes():
            return Response(body=value, content_type="application/octet-stream")
        case (inner, int() as status):
            return negotiate(inner).with_status(status)
        case _:
            msg = (
                f"Cannot convert {type(value).__name__} to a response. "
                "Return a str, bytes, Response, or (value, status) tuple."
            )
            raise TypeError(msg)
