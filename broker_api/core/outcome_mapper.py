"""Outcome → HTTP response mapping.

Pure functions translating one operation outcome into the status code, JSON
body and optional error log line sent for it. The status choices follow the
Open Service Broker contract:

    409 Conflict  - the resource already exists (repeat provision/bind)
    410 Gone      - delete of something already absent (idempotent delete)
    404 Not Found - bind/unbind against an instance that was never created
    500           - limit reached or any unexpected broker failure

Unexpected failures expose the broker's message unchanged in both the body
and the log line.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional

from broker_api.core.outcomes import (
    BindingAlreadyExists,
    BindingDoesNotExist,
    BindOutcome,
    Bound,
    Deprovisioned,
    DeprovisionOutcome,
    InstanceAlreadyExists,
    InstanceDoesNotExist,
    InstanceLimitReached,
    Provisioned,
    ProvisionOutcome,
    Unbound,
    UnbindOutcome,
    Unexpected,
)

INSTANCE_LIMIT_REACHED = "instance limit for this service has been reached"
INSTANCE_DOES_NOT_EXIST = "instance does not exist"
BINDING_ALREADY_EXISTS = "binding already exists"


@dataclass(frozen=True)
class MappedResponse:
    """Wire representation of one outcome."""
    status: int
    body: Any = field(default_factory=dict)
    log_message: Optional[str] = None


def _error_body(description: str) -> dict:
    return {"description": description}


def _unexpected(prefix: str, outcome: Unexpected) -> MappedResponse:
    return MappedResponse(500, _error_body(outcome.message), f"{prefix} error: {outcome.message}")


def _unknown_outcome(operation: str, outcome: Any) -> TypeError:
    return TypeError(f"Not a {operation} outcome: {outcome!r}")


def map_provision_outcome(outcome: ProvisionOutcome) -> MappedResponse:
    """Map a provision outcome (PUT /v2/service_instances/<id>)."""
    if isinstance(outcome, Provisioned):
        return MappedResponse(201, {"dashboard_url": outcome.dashboard_url})
    if isinstance(outcome, InstanceAlreadyExists):
        return MappedResponse(
            409, {}, f"Provisioning error: instance {outcome.instance_id} already exists"
        )
    if isinstance(outcome, InstanceLimitReached):
        return MappedResponse(
            500, _error_body(INSTANCE_LIMIT_REACHED), f"Provisioning error: {INSTANCE_LIMIT_REACHED}"
        )
    if isinstance(outcome, Unexpected):
        return _unexpected("Provisioning", outcome)
    raise _unknown_outcome("provision", outcome)


def map_deprovision_outcome(outcome: DeprovisionOutcome) -> MappedResponse:
    """Map a deprovision outcome (DELETE /v2/service_instances/<id>)."""
    if isinstance(outcome, Deprovisioned):
        return MappedResponse(200, {})
    if isinstance(outcome, InstanceDoesNotExist):
        return MappedResponse(
            410, {}, f"Deprovisioning error: instance {outcome.instance_id} does not exist"
        )
    if isinstance(outcome, Unexpected):
        return _unexpected("Deprovisioning", outcome)
    raise _unknown_outcome("deprovision", outcome)


def map_bind_outcome(outcome: BindOutcome) -> MappedResponse:
    """Map a bind outcome. Credentials are passed through untouched."""
    if isinstance(outcome, Bound):
        return MappedResponse(201, outcome.credentials)
    if isinstance(outcome, InstanceDoesNotExist):
        return MappedResponse(
            404,
            _error_body(INSTANCE_DOES_NOT_EXIST),
            f"Binding error: instance {outcome.instance_id} does not exist",
        )
    if isinstance(outcome, BindingAlreadyExists):
        return MappedResponse(
            409, _error_body(BINDING_ALREADY_EXISTS), f"Binding error: {BINDING_ALREADY_EXISTS}"
        )
    if isinstance(outcome, Unexpected):
        return _unexpected("Binding", outcome)
    raise _unknown_outcome("bind", outcome)


def map_unbind_outcome(outcome: UnbindOutcome) -> MappedResponse:
    """Map an unbind outcome."""
    if isinstance(outcome, Unbound):
        return MappedResponse(200, {})
    if isinstance(outcome, InstanceDoesNotExist):
        return MappedResponse(
            404, {}, f"Unbinding error: instance {outcome.instance_id} does not exist"
        )
    if isinstance(outcome, BindingDoesNotExist):
        return MappedResponse(
            410, {}, f"Unbinding error: binding {outcome.binding_id} does not exist"
        )
    if isinstance(outcome, Unexpected):
        return _unexpected("Unbinding", outcome)
    raise _unknown_outcome("unbind", outcome)
