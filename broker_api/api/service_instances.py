"""Open Service Broker instance and binding endpoints.

Each handler calls one broker operation, maps the outcome to a response and
logs the mapped error line, if any, through the injected broker logger.

Architecture:
    Flask route -> core.outcomes (broker call) -> core.outcome_mapper -> JSON response

Routes (registered under /v2):
    PUT    /service_instances/<instance_id>                                -> provision
    DELETE /service_instances/<instance_id>                                -> deprovision
    PUT    /service_instances/<instance_id>/service_bindings/<binding_id>  -> bind
    DELETE /service_instances/<instance_id>/service_bindings/<binding_id>  -> unbind

Request bodies are not read.
"""
from __future__ import annotations
from flask import Blueprint

from broker_api.api.responses import json_response
from broker_api.core import outcomes
from broker_api.core.broker import BrokerLogger, ServiceBroker
from broker_api.core.outcome_mapper import (
    MappedResponse,
    map_bind_outcome,
    map_deprovision_outcome,
    map_provision_outcome,
    map_unbind_outcome,
)

INSTANCE_PATH = "/service_instances/<instance_id>"
BINDING_PATH = "/service_instances/<instance_id>/service_bindings/<binding_id>"


def _respond(mapped: MappedResponse, broker_logger: BrokerLogger):
    """Emit the mapped log line and build the JSON response."""
    if mapped.log_message:
        broker_logger.error(mapped.log_message)
    return json_response(mapped.body, mapped.status)


def create_service_instances_blueprint(broker: ServiceBroker, broker_logger: BrokerLogger) -> Blueprint:
    """Build the instance/binding blueprint around a broker and a logger.

    Args:
        broker: Broker capability that owns instance and binding state
        broker_logger: Receives one ``error()`` call per failed operation

    Returns:
        Blueprint to register under the ``/v2`` prefix
    """
    bp = Blueprint("service_instances", __name__)

    @bp.route(INSTANCE_PATH, methods=["PUT"])
    def provision_instance(instance_id: str):
        """Provision a service instance.

        Returns:
            201 {"dashboard_url": ...}, 409 {} if it exists, 500 on limit or failure
        """
        outcome = outcomes.provision(broker, instance_id)
        return _respond(map_provision_outcome(outcome), broker_logger)

    @bp.route(INSTANCE_PATH, methods=["DELETE"])
    def deprovision_instance(instance_id: str):
        """Deprovision a service instance (410 {} when already gone)."""
        outcome = outcomes.deprovision(broker, instance_id)
        return _respond(map_deprovision_outcome(outcome), broker_logger)

    @bp.route(BINDING_PATH, methods=["PUT"])
    def bind_instance(instance_id: str, binding_id: str):
        """Create a binding and return the broker's credentials payload.

        Returns:
            201 credentials, 404 if the instance is missing, 409 if the binding exists
        """
        outcome = outcomes.bind(broker, instance_id, binding_id)
        return _respond(map_bind_outcome(outcome), broker_logger)

    @bp.route(BINDING_PATH, methods=["DELETE"])
    def unbind_instance(instance_id: str, binding_id: str):
        """Remove a binding (404 {} for a missing instance, 410 {} for a missing binding)."""
        outcome = outcomes.unbind(broker, instance_id, binding_id)
        return _respond(map_unbind_outcome(outcome), broker_logger)

    return bp
