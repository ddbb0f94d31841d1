"""Web - Flask API for the bblex tokenizer."""

from .server import create_app, get_app, run_server

__all__ = ['create_app', 'get_app', 'run_server']
