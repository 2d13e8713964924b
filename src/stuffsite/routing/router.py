"""Compiled router with trie-based static path matching.

Routes are registered during setup and compiled into an immutable
lookup structure when the app freezes.
"""

from stuffsite.errors import ConfigurationError, MethodNotAllowed, NotFound
from stuffsite.routing.route import Route, RouteMatch

_PARAM_CHARS = frozenset("{}<>")


def parse_path(path: str) -> list[str]:
    """Split a route path into its static segments.

    Examples::

        "/"           -> []
        "/stuff"      -> ["stuff"]
        "/stuff/item" -> ["stuff", "item"]

    Raises ``ConfigurationError`` for paths that don't start with ``/``
    or that contain parameter syntax (only static paths are routable).
    """
    if not path.startswith("/"):
        msg = f"Route path must start with '/': {path!r}"
        raise ConfigurationError(msg)
    if _PARAM_CHARS & set(path):
        msg = f"Route {path!r} contains parameter syntax; only static paths are supported."
        raise ConfigurationError(msg)
    return [part for part in path.split("/") if part]


class _TrieNode:
    """A node in the route trie. Mutable during compilation only."""

    __slots__ = ("children", "routes_by_method")

    def __init__(self) -> None:
        # Static segment children: "stuff" -> node
        self.children: dict[str, _TrieNode] = {}
        # Routes at this node, keyed by HTTP method
        self.routes_by_method: dict[str, Route] = {}


class Router:
    """Compiled router with trie-based path matching.

    Usage::

        router = Router()
        router.add(Route("/stuff", handler, frozenset({"GET"})))
        router.compile()
        match = router.match("GET", "/stuff")

    A route registered for GET also answers HEAD unless HEAD was
    registered explicitly for the same path.
    """

    __slots__ = ("_compiled", "_root")

    def __init__(self) -> None:
        self._root = _TrieNode()
        self._compiled = False

    def add(self, route: Route) -> None:
        """Add a route to the router. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        node = self._root
        for segment in parse_path(route.path):
            node = node.children.setdefault(segment, _TrieNode())

        for method in route.methods:
            node.routes_by_method[method] = route
        if "GET" in route.methods:
            node.routes_by_method.setdefault("HEAD", route)

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes, each once, shallowest paths first."""
        seen: set[int] = set()
        result: list[Route] = []
        stack = [self._root]
        while stack:
            node = stack.pop(0)
            for route in node.routes_by_method.values():
                if id(route) not in seen:
                    seen.add(id(route))
                    result.append(route)
            stack.extend(node.children.values())
        return result

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, method: str, path: str) -> RouteMatch:
        """Match a request path and method against compiled routes.

        Returns a ``RouteMatch`` on success.
        Raises ``NotFound`` if no route matches the path.
        Raises ``MethodNotAllowed`` if the path matches but the method doesn't.
        """
        node = self._root
        for part in path.split("/"):
            if not part:
                continue
            child = node.children.get(part)
            if child is None:
                raise NotFound(f"No route matches {method} {path!r}")
            node = child

        if not node.routes_by_method:
            raise NotFound(f"No route matches {method} {path!r}")

        route = node.routes_by_method.get(method)
        if route is None:
            raise MethodNotAllowed(frozenset(node.routes_by_method))
        return RouteMatch(route=route)
