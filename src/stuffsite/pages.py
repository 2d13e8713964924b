"""The stuff inventory site: three static pages.

Run:
    python -m stuffsite
"""

from stuffsite.app import App
from stuffsite.config import AppConfig


def create_app(config: AppConfig | None = None) -> App:
    """Build the site with its three routes registered."""
    app = App(config or AppConfig())

    # default home page
    @app.route("/")
    def index() -> str:
        return "<h1>Hello world!</h1>"

    # stuff inventory page
    @app.route("/stuff")
    def stuff() -> str:
        return "<h1>This is the stuff inventory page.</h1>"

    # item detail page
    @app.route("/stuff/item")
    def item() -> str:
        return "<h1>This is the item detail page.</h1>"

    return app


app = create_app()
