#!/usr/bin/python3

""" Web server for the bblex tokenizer API. """

import argparse
import sys
from typing import List, Optional

from flask import Flask
from waitress import serve

import constants
from common.base.logging_config import configure_logging, get_logger
logger = get_logger(__name__)


def create_app(testing: bool = False) -> Flask:
    """
    Create and configure Flask application instance.

    :param testing: Whether to configure app for testing
    :return: Configured Flask app
    """
    if testing:
        constants.init_testing()

    if not constants.INITIALIZED:
        raise RuntimeError("System not initialized. Call constants.init_production() before creating the app.")

    app = Flask(__name__)
    app.config['TESTING'] = testing
    # JSON envelope adds some overhead on top of the document itself
    app.config['MAX_CONTENT_LENGTH'] = constants.MAX_INPUT_LENGTH * 4 + 1024

    from web.blueprints import BLUEPRINTS
    for blueprint in BLUEPRINTS:
        app.register_blueprint(blueprint)

    logger.info(f"Created app (testing={testing}, max_input_length={constants.MAX_INPUT_LENGTH})")
    return app

# The app instance will be created when needed
app = None

def get_app() -> Flask:
    """Get or create the Flask application instance."""
    global app
    if app is None:
        app = create_app()
    return app

def run_server(host: str = '0.0.0.0', port: int = 5000, debug: Optional[bool] = None) -> None:
    """
    Run the tokenizer API server.

    :param debug: Use the Flask development server; defaults to FLASK_ENV=development
    """
    if debug is None:
        debug = constants.is_development_mode()
    logger.info(f"Starting tokenizer server on {host}:{port}")

    if debug:
        # Use Flask's built-in development server for debug mode
        flask_app = get_app()
        flask_app.config['DEBUG'] = True
        flask_app.run(host=host, port=port, debug=True)
    else:
        serve(get_app(), host=host, port=port)

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Launch the bblex tokenizer API server.',
        prog='bblex-server'
    )
    parser.add_argument('--host', default='0.0.0.0',
                        help='Host for server (default: 0.0.0.0)')
    parser.add_argument('--port', type=int, default=5000,
                        help='Port for server (default: 5000)')
    parser.add_argument('--debug', action='store_true', default=None,
                        help='Use the Flask development server (default: on when FLASK_ENV=development)')
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set the root logging level (default: INFO)')
    parser.add_argument('--lexer-log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set the bb_parser logging level; DEBUG traces every token (default: INFO)')
    return parser.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    constants.init_production()
    configure_logging(log_level=args.log_level, lexer_log_level=args.lexer_log_level)

    try:
        run_server(host=args.host, port=args.port, debug=args.debug)
    except KeyboardInterrupt:
        logger.info("Shutting down on keyboard interrupt")
    return 0

if __name__ == '__main__':
    sys.exit(main())
