"""HTTP server routes and handlers."""
import logging
from typing import Any, Dict, Tuple

from flask import Flask, jsonify, request

from .paths import alternating_paths, shortest_alternating_paths
from .types import EdgeList, InvalidGraphError

logger = logging.getLogger(__name__)


class BadRequestBody(Exception):
    """Request body is not a usable graph description."""


def _read_graph() -> Tuple[Any, EdgeList, EdgeList]:
    """Pull (n, red_edges, blue_edges) out of the JSON request body."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadRequestBody('invalid JSON')
    if 'n' not in data:
        raise BadRequestBody('missing field: n')
    return data['n'], data.get('red_edges', []), data.get('blue_edges', [])


def _error(message: str) -> Tuple[Any, int]:
    logger.warning("Rejected %s %s: %s", request.method, request.path, message)
    return jsonify({'error': message}), 400


def create_app() -> Flask:
    """Create and configure Flask app.

    Returns:
        Configured Flask app
    """
    app = Flask(__name__)

    @app.errorhandler(BadRequestBody)
    def handle_bad_body(e: BadRequestBody):
        return _error(str(e))

    @app.errorhandler(InvalidGraphError)
    def handle_invalid_graph(e: InvalidGraphError):
        return _error(str(e))

    @app.route('/health', methods=['GET'])
    def health():
        """Liveness check."""
        return jsonify({'status': 'ok'})

    @app.route('/shortest-alternating-paths', methods=['POST'])
    def post_shortest_alternating_paths():
        """Distances from node 0 for the posted graph."""
        distances = shortest_alternating_paths(*_read_graph())
        return jsonify({'distances': distances})

    @app.route('/alternating-paths', methods=['POST'])
    def post_alternating_paths():
        """Distances plus one shortest walk per node."""
        result: Dict[str, Any] = alternating_paths(*_read_graph())
        return jsonify(result)

    return app
