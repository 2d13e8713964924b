"""Stuffsite — a tiny ASGI site serving three static HTML pages.

Basic usage::

    from stuffsite import App

    app = App()

    @app.route("/")
    def index():
        return "<h1>Hello world!</h1>"

    app.run()

The stuff inventory site itself lives in ``stuffsite.pages``.
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "HTTPError",
    "MethodNotAllowed",
    "NotFound",
    "Request",
    "Response",
    "StuffsiteError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import stuffsite`` fast while providing a clean top-level API.
    """
    if name == "App":
        from stuffsite.app import App

        return App

    if name == "AppConfig":
        from stuffsite.config import AppConfig

        return AppConfig

    if name == "Request":
        from stuffsite.http.request import Request

        return Request

    if name == "Response":
        from stuffsite.http.response import Response

        return Response

    if name in (
        "ConfigurationError",
        "HTTPError",
        "MethodNotAllowed",
        "NotFound",
        "StuffsiteError",
    ):
        from stuffsite import errors

        return getattr(errors, name)

    msg = f"module 'stuffsite' has no attribute {name!r}"
    raise AttributeError(msg)
