"""
Run ogcapi-dggs as gunicorn app
"""

import argparse
import logging.config

import flask
import gunicorn.app.base

from ogcapi_dggs.app import create_app, get_logging_config

_log = logging.getLogger(__name__)


class StandaloneApplication(gunicorn.app.base.BaseApplication):
    """Gunicorn application wrapping an already constructed Flask app."""

    def __init__(self, app: flask.Flask, options: dict):
        self.application = app
        self.options = options
        super().__init__()

    def load_config(self):
        for key, value in self.options.items():
            if key in self.cfg.settings and value is not None:
                self.cfg.set(key.lower(), value)

    def load(self):
        return self.application


def main():
    parser = argparse.ArgumentParser(description="Run the DGGS API with gunicorn")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8080, help="Port to bind to")
    parser.add_argument("--workers", type=int, default=1, help="Number of gunicorn worker processes")
    parser.add_argument("--threads", type=int, default=2, help="Number of threads per worker")
    args = parser.parse_args()

    logging.config.dictConfig(get_logging_config())
    app = create_app(auto_logging_setup=False)

    options = {
        "bind": f"{args.host}:{args.port}",
        "workers": args.workers,
        "threads": args.threads,
        # Worker timeout bounds slow store reads of a single request
        "timeout": 60,
    }
    _log.info(f"Starting gunicorn with {options=}")
    StandaloneApplication(app, options).run()


if __name__ == "__main__":
    main()
