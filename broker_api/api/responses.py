"""JSON response construction for broker endpoints."""
from flask import Response, current_app


def json_response(body, status: int) -> Response:
    """Build a JSON Response whose payload is exactly the serialized body.

    Unlike ``jsonify`` no trailing newline is written, so an empty result is
    the two bytes ``{}``.
    """
    response = current_app.response_class(
        current_app.json.dumps(body),
        mimetype="application/json",
    )
    response.status_code = status
    return response
