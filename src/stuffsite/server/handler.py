"""ASGI handler — translates ASGI scope/messages to stuffsite types.

The only component that touches raw HTTP scopes directly. Converts scope
dicts to typed Request objects, dispatches through routing, and sends
the Response back through ASGI send().
"""

import inspect
from collections.abc import Callable
from typing import Any

from stuffsite._internal.asgi import Receive, Scope, Send
from stuffsite._internal.invoke import invoke
from stuffsite.errors import HTTPError
from stuffsite.http.request import Request
from stuffsite.http.response import Response
from stuffsite.routing.route import RouteMatch
from stuffsite.routing.router import Router
from stuffsite.server.errors import handle_http_error, handle_internal_error
from stuffsite.server.negotiation import negotiate
from stuffsite.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    error_handlers: dict[int | type, Callable[..., Any]],
    debug: bool,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    try:
        match = router.match(request.method, request.path)
        response = await _invoke_handler(match, request)
    except HTTPError as exc:
        response = await handle_http_error(exc, request, error_handlers, debug)
    except Exception as exc:
        response = await handle_internal_error(exc, request, error_handlers, debug)

    await send_response(response, send, head=request.is_head)


async def _invoke_handler(match: RouteMatch, request: Request) -> Response:
    """Call the matched route handler and convert its return value."""
    handler = match.route.handler
    kwargs = _build_handler_kwargs(handler, request)
    result = await invoke(handler, **kwargs)
    return negotiate(result)


def _build_handler_kwargs(handler: Callable[..., Any], request: Request) -> dict[str, Any]:
    """Pass the request to handlers that ask for it, by name or annotation."""
    kwargs: dict[str, Any] = {}
    for name, param in inspect.signature(handler).parameters.items():
        if name == "request" or param.annotation is Request:
            kwargs[name] = request
    return kwargs
