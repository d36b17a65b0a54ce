"""Catalog endpoint."""
from flask import Blueprint

from broker_api.api.responses import json_response
from broker_api.core.broker import ServiceBroker


def create_catalog_blueprint(broker: ServiceBroker) -> Blueprint:
    """Build the catalog blueprint around a broker."""
    bp = Blueprint("catalog", __name__)

    @bp.route("/catalog", methods=["GET"])
    def get_catalog():
        """Return the broker's catalog unmodified."""
        return json_response(broker.catalog(), 200)

    return bp
