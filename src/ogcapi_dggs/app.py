"""
ogcapi-dggs Flask app
"""

import logging
import logging.config
import os
from typing import List, Optional

import flask

from ogcapi_dggs.about import log_version_info
from ogcapi_dggs.collection_catalog import DggsCollectionCatalog
from ogcapi_dggs.config import DggsApiConfig, get_config
from ogcapi_dggs.utils import smart_bool
from ogcapi_dggs.views import build_blueprint, register_error_handlers

_log = logging.getLogger(__name__)


LOG_HANDLER_STDERR_BASIC = "stderr_basic"
LOG_HANDLER_STDERR_JSON = "stderr_json"

JSON_LOGGER_DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def create_app(config: Optional[DggsApiConfig] = None, auto_logging_setup: bool = True) -> flask.Flask:
    """
    Flask application factory function.
    """
    # This `create_app` factory is auto-detected by Flask's application discovery when running `flask run`
    # see https://flask.palletsprojects.com/en/2.0.x/cli/#application-discovery

    if auto_logging_setup:
        logging.config.dictConfig(get_logging_config())

    log_version_info(logger=_log)

    config = config or get_config()
    _log.info(f"Using config {config.id!r} from {config.config_source}")

    collection_catalog = DggsCollectionCatalog.from_config(config)

    app = flask.Flask(__name__)
    # Keep document field order (e.g. "id" first) in JSON output
    app.json.sort_keys = False
    app.register_blueprint(build_blueprint(config=config, collection_catalog=collection_catalog))
    register_error_handlers(app)

    _log.info(f"Built {app=!r}")
    return app


def get_logging_config(
    *,
    handler_default_level: str = "DEBUG",
    root_handlers: Optional[List[str]] = None,
) -> dict:
    """Logging config (for `logging.config.dictConfig`), with JSON logging to stderr by default."""
    root_handlers = root_handlers or [LOG_HANDLER_STDERR_JSON]
    if smart_bool(os.environ.get("DGGS_API_SIMPLE_LOGGING")):
        root_handlers = [LOG_HANDLER_STDERR_BASIC]

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "basic": {
                "format": "[%(asctime)s] %(process)s %(levelname)s in %(name)s: %(message)s",
            },
            "json": {
                "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
                "format": JSON_LOGGER_DEFAULT_FORMAT,
            },
        },
        "handlers": {
            LOG_HANDLER_STDERR_BASIC: {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "basic",
                "level": handler_default_level,
            },
            LOG_HANDLER_STDERR_JSON: {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "json",
                "level": handler_default_level,
            },
        },
        "root": {
            "level": "INFO",
            "handlers": root_handlers,
        },
        "loggers": {
            "ogcapi_dggs": {"level": "DEBUG"},
            "flask": {"level": "INFO"},
            "werkzeug": {"level": "INFO"},
            "gunicorn": {"level": "INFO"},
        },
    }


if __name__ == "__main__":
    app = create_app()
    app.run()
