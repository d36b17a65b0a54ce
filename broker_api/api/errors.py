"""Error handlers for the application.

Only failures raised by the router or by this layer land here; broker
outcomes are answered by the endpoint handlers themselves.
"""
from flask import jsonify
from werkzeug.exceptions import HTTPException


def _description(description: str, status: int):
    return jsonify({"description": description}), status


def register_error_handlers(app):
    """Register JSON error handlers with the Flask app."""

    @app.errorhandler(404)
    def not_found(error):
        """Handle 404 Not Found errors (unknown path)."""
        return _description("resource not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(error):
        """Handle 405 Method Not Allowed errors."""
        return _description("method not allowed", 405)

    @app.errorhandler(Exception)
    def handle_exception(error):
        """Handle uncaught exceptions."""
        if isinstance(error, HTTPException):
            return _description(error.description or error.name, error.code or 500)

        # ALWAYS log the full error with traceback
        app.logger.error(f"Unhandled exception: {error}", exc_info=True)
        return _description("internal server error", 500)
