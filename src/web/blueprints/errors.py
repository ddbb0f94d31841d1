"""Error handling blueprint for the bblex web API."""

from flask import Blueprint, current_app, jsonify, request
from flask.typing import ResponseReturnValue

from bb_parser.errors import LexerError, UnsupportedConstructError
from common.base.logging_config import get_logger

logger = get_logger(__name__)

errors_bp = Blueprint('errors', __name__)


def handle_error(error_code: str, error_title: str, error_message: str, details=None, **extra) -> ResponseReturnValue:
    """
    Unified JSON error response.

    :param error_code: HTTP status code as string
    :param error_title: Short title, also used to build the machine-readable error key
    :param error_message: User-friendly error description
    :param details: Optional technical details (shown only in debug mode)
    :param extra: Additional fields copied into the response body
    :return: JSON response with appropriate status code
    """
    status_code = int(error_code)

    response = {
        'error': error_title.lower().replace(' ', '_'),
        'message': error_message
    }
    response.update(extra)
    if current_app.debug and details:
        response['details'] = details

    return jsonify(response), status_code

@errors_bp.app_errorhandler(400)
def bad_request(e):
    """Handle 400 Bad Request errors."""
    logger.warning(f"Bad request: {str(e)}")
    return handle_error(
        "400",
        "Bad Request",
        getattr(e, 'description', None) or "The request could not be understood by the server.",
        str(e)
    )

@errors_bp.app_errorhandler(404)
def page_not_found(e):
    """Handle 404 Not Found errors."""
    logger.info(f"Page not found: {request.path}")
    return handle_error(
        "404",
        "Not Found",
        "The requested resource could not be found.",
        str(e)
    )

@errors_bp.app_errorhandler(405)
def method_not_allowed(e):
    """Handle 405 Method Not Allowed errors."""
    logger.warning(f"Method not allowed: {request.method} {request.path}")
    return handle_error(
        "405",
        "Method Not Allowed",
        f"The {request.method} method is not allowed for this endpoint.",
        str(e)
    )

@errors_bp.app_errorhandler(413)
def payload_too_large(e):
    """Handle 413 Payload Too Large errors."""
    logger.warning(f"Payload too large: {str(e)}")
    return handle_error(
        "413",
        "Payload Too Large",
        getattr(e, 'description', None) or "The document is too large to tokenize.",
        str(e)
    )

@errors_bp.app_errorhandler(UnsupportedConstructError)
def handle_unsupported_construct(e):
    """Handle markup the lexer does not implement."""
    logger.info(f"Unsupported construct: {e}")
    return handle_error(
        "422",
        "Unsupported Construct",
        str(e),
        line=e.line,
        column=e.column
    )

@errors_bp.app_errorhandler(LexerError)
def handle_lexer_error(e):
    """Handle any other lexical analysis failure."""
    logger.error(f"Lexer error: {str(e)}", exc_info=True)
    return handle_error(
        "422",
        "Lexer Error",
        str(e),
        line=e.line,
        column=e.column
    )

@errors_bp.app_errorhandler(500)
def internal_server_error(e):
    """Handle 500 Internal Server errors."""
    logger.error(f"Internal server error: {str(e)}", exc_info=True)
    return handle_error(
        "500",
        "Internal Server Error",
        "An unexpected error occurred.",
        str(e)
    )
