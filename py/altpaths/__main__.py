"""Entry point for running the altpaths HTTP API (python -m altpaths)."""

import argparse
import logging
import os

from .logging_config import setup_logging
from .server import create_app

logger = logging.getLogger(__name__)


def main():
    """Main entry point for the altpaths server."""
    parser = argparse.ArgumentParser(description='Alternating-color shortest path HTTP API')
    parser.add_argument('--host', type=str, help='Interface to bind')
    parser.add_argument('--port', type=int, help='Port to listen on')
    parser.add_argument('--log-level', type=str, help='DEBUG, INFO, WARNING or ERROR')
    args = parser.parse_args()

    # Args take precedence over env, env over defaults
    host = args.host or os.environ.get('HOST', '0.0.0.0')
    port = args.port or int(os.environ.get('PORT', '8080'))
    log_level = args.log_level or os.environ.get('LOG_LEVEL', 'INFO')

    setup_logging(log_level)
    logger.info("Starting altpaths server on %s:%d", host, port)

    app = create_app()
    app.run(host=host, port=port, threaded=True)


if __name__ == '__main__':
    main()
