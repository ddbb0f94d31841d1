"""
Tokenizer API blueprint.

Exposes the bracket-tag lexer over HTTP so that front ends and debugging tools
can inspect the token stream of a document.
"""

from flask import Blueprint, abort, jsonify, request

import constants
from bb_parser.lexer import BBCodeLexer
from bb_parser.markup import to_markup
from bb_parser.tags import TAGS
from bb_parser.tokens import TokenType
from common.base.logging_config import get_logger

logger = get_logger(__name__)

tokens_bp = Blueprint('tokens', __name__, url_prefix='/api')


@tokens_bp.route('/tags', methods=['GET'])
def list_tags():
    """List the recognized tag names in registry order."""
    return jsonify({'tags': list(TAGS)})


@tokens_bp.route('/tokenize', methods=['POST'])
def tokenize_document():
    """
    Tokenize a document.

    Expects a JSON body ``{"text": "..."}``.

    :return: JSON with the token list, unbalanced tag counts and rebuilt markup
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get('text'), str):
        abort(400, description="Request body must be a JSON object with a string 'text' field.")

    text = data['text']
    if len(text) > constants.MAX_INPUT_LENGTH:
        abort(413, description=f"Document exceeds {constants.MAX_INPUT_LENGTH} characters.")

    lexer = BBCodeLexer(text)
    tokens = list(lexer.tokenize())

    missing_closing = sum(1 for t in tokens if t.type is TokenType.MISSING_CLOSING)
    missing_opening = sum(1 for t in tokens if t.type is TokenType.MISSING_OPENING)
    if missing_closing or missing_opening:
        logger.info(f"Unbalanced document: {missing_opening} stray closing, {missing_closing} unclosed tags")

    return jsonify({
        'tokens': [t.to_dict() for t in tokens],
        'missing_closing': missing_closing,
        'missing_opening': missing_opening,
        'markup': to_markup(tokens),
    })
