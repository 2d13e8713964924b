"""Entry point — ``python -m stuffsite`` or the ``stuffsite`` script.

Takes no arguments; host, port and log level come from the app's AppConfig.
"""

import logging


def main() -> None:
    """Configure logging and serve the stuff inventory site."""
    from stuffsite.pages import app

    logging.basicConfig(
        level=app.config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.run()


if __name__ == "__main__":
    main()
