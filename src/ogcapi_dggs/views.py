import logging

import flask
from werkzeug.exceptions import HTTPException

from ogcapi_dggs.collection_catalog import DggsCollectionCatalog
from ogcapi_dggs.config import DggsApiConfig
from ogcapi_dggs.errors import DggsApiException, InternalException
from ogcapi_dggs.formats import negotiate_format, render

_log = logging.getLogger(__name__)


def build_blueprint(config: DggsApiConfig, collection_catalog: DggsCollectionCatalog) -> flask.Blueprint:
    """Blueprint with the DGGS collection endpoints, mounted under the configured base path."""
    bp = flask.Blueprint("dggs", __name__, url_prefix="/" + config.base_path.strip("/"))

    def request_format() -> str:
        return negotiate_format(f=flask.request.args.get("f"), accept=flask.request.accept_mimetypes)

    @bp.route("/collections", methods=["GET"])
    def collections():
        media_type = request_format()
        document = collection_catalog.get_collections_document(
            base_url=flask.request.url_root,
            producible_formats=config.collection_formats,
            request_format=media_type,
        )
        return render(document, media_type, template="collections.html", xml_root="Collections")

    @bp.route("/collections/<collection_id>", methods=["GET"])
    def collection(collection_id: str):
        media_type = request_format()
        document = collection_catalog.get_collection_document(
            collection_id,
            base_url=flask.request.url_root,
            producible_formats=config.collection_formats,
            request_format=media_type,
        )
        return render(document, media_type, template="collection.html", xml_root="Collection")

    return bp


def register_error_handlers(app: flask.Flask):
    @app.errorhandler(DggsApiException)
    def handle_api_exception(error: DggsApiException):
        if error.status_code >= 500:
            _log.error(f"{error!r}")
        else:
            _log.warning(f"{error!r}")
        return flask.jsonify(error.to_dict()), error.status_code

    @app.errorhandler(Exception)
    def handle_unexpected(error: Exception):
        if isinstance(error, HTTPException):
            return error
        _log.exception(f"Unexpected error: {error!r}")
        api_error = InternalException(message=repr(error))
        return flask.jsonify(api_error.to_dict()), api_error.status_code
