import logging

import flask
from werkzeug.exceptions import HTTPException

from . import database, graph
from .config import get_config
from .errors import LitagError
from .repo import create_repo


_logger = logging.getLogger(__name__)


def create_app(config_name=None, *, engine=None):
    app = flask.Flask(__name__)
    app.config.from_object(get_config(config_name))

    if engine is None:
        engine = database.create_engine(
            app.config["DATABASE_URL"],
            echo=app.config["DATABASE_ECHO"],
        )
    database.setup(engine=engine)

    repo = create_repo(engine)
    app.extensions["litag.engine"] = engine
    app.extensions["litag.repo"] = repo

    _register_error_handlers(app)

    @app.route("/")
    def index():
        return flask.jsonify({
            "message": "litag GraphQL API",
            "query": flask.url_for("query"),
            "health": flask.url_for("health"),
        })

    @app.route("/health")
    def health():
        return flask.jsonify({"status": "ok"})

    @app.route("/query", methods=["POST"])
    def query():
        request = flask.request.get_json(silent=True)
        if not isinstance(request, dict) or not isinstance(request.get("query"), str):
            flask.abort(400, description="request body must be a JSON object with a query")

        result = graph.execute(
            request["query"],
            graph=graph.create_graph(repo=repo),
            variables=request.get("variables") or {},
            operation_name=request.get("operationName"),
        )

        response = {"data": result.data}
        if result.errors:
            for error in result.errors:
                _log_graphql_error(error)
            response["errors"] = [error.formatted for error in result.errors]

        return flask.jsonify(response)

    return app


def _log_graphql_error(error):
    if isinstance(error.original_error, LitagError):
        _logger.info("query failed: %s", error.message)
    elif error.original_error is not None:
        _logger.exception("unexpected error in resolver", exc_info=error.original_error)


def _register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        payload = {"error": error.name, "message": error.description}
        return flask.jsonify(payload), error.code
