"""Outcome types for broker operations.

Each broker operation yields exactly one outcome: a success value or one of a
closed set of named failures, with ``Unexpected`` carrying the message of any
error the operation does not recognize.

Usage:
    outcome = outcomes.provision(broker, "instance-1")
    if isinstance(outcome, outcomes.InstanceAlreadyExists):
        ...
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Union

from broker_api.core.broker import ServiceBroker
from broker_api.core.exceptions import (
    BindingAlreadyExistsError,
    BindingDoesNotExistError,
    InstanceAlreadyExistsError,
    InstanceDoesNotExistError,
    InstanceLimitReachedError,
)


# ─────────────────────────────────────────────────────────────────────────────
# Success Variants
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Provisioned:
    dashboard_url: str = ""


@dataclass(frozen=True)
class Deprovisioned:
    pass


@dataclass(frozen=True)
class Bound:
    credentials: Any


@dataclass(frozen=True)
class Unbound:
    pass


# ─────────────────────────────────────────────────────────────────────────────
# Failure Variants
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class InstanceAlreadyExists:
    instance_id: str


@dataclass(frozen=True)
class InstanceLimitReached:
    pass


@dataclass(frozen=True)
class InstanceDoesNotExist:
    instance_id: str


@dataclass(frozen=True)
class BindingAlreadyExists:
    binding_id: str


@dataclass(frozen=True)
class BindingDoesNotExist:
    binding_id: str


@dataclass(frozen=True)
class Unexpected:
    """Any failure the operation does not recognize, message kept verbatim."""
    message: str


ProvisionOutcome = Union[Provisioned, InstanceAlreadyExists, InstanceLimitReached, Unexpected]
DeprovisionOutcome = Union[Deprovisioned, InstanceDoesNotExist, Unexpected]
BindOutcome = Union[Bound, InstanceDoesNotExist, BindingAlreadyExists, Unexpected]
UnbindOutcome = Union[Unbound, InstanceDoesNotExist, BindingDoesNotExist, Unexpected]


# ─────────────────────────────────────────────────────────────────────────────
# Capture Functions
# ─────────────────────────────────────────────────────────────────────────────
# Only the sentinels listed in each function are recognized for that
# operation. A sentinel raised by the wrong operation is Unexpected.

def provision(broker: ServiceBroker, instance_id: str) -> ProvisionOutcome:
    """Call ``broker.provision`` and capture the result as an outcome."""
    try:
        dashboard_url = broker.provision(instance_id)
    except InstanceAlreadyExistsError:
        return InstanceAlreadyExists(instance_id)
    except InstanceLimitReachedError:
        return InstanceLimitReached()
    except Exception as exc:
        return Unexpected(str(exc))
    return Provisioned(dashboard_url or "")


def deprovision(broker: ServiceBroker, instance_id: str) -> DeprovisionOutcome:
    """Call ``broker.deprovision`` and capture the result as an outcome."""
    try:
        broker.deprovision(instance_id)
    except InstanceDoesNotExistError:
        return InstanceDoesNotExist(instance_id)
    except Exception as exc:
        return Unexpected(str(exc))
    return Deprovisioned()


def bind(broker: ServiceBroker, instance_id: str, binding_id: str) -> BindOutcome:
    """Call ``broker.bind`` and capture the result as an outcome."""
    try:
        credentials = broker.bind(instance_id, binding_id)
    except InstanceDoesNotExistError:
        return InstanceDoesNotExist(instance_id)
    except BindingAlreadyExistsError:
        return BindingAlreadyExists(binding_id)
    except Exception as exc:
        return Unexpected(str(exc))
    return Bound(credentials if credentials is not None else {})


def unbind(broker: ServiceBroker, instance_id: str, binding_id: str) -> UnbindOutcome:
    """Call ``broker.unbind`` and capture the result as an outcome."""
    try:
        broker.unbind(instance_id, binding_id)
    except InstanceDoesNotExistError:
        return InstanceDoesNotExist(instance_id)
    except BindingDoesNotExistError:
        return BindingDoesNotExist(binding_id)
    except Exception as exc:
        return Unexpected(str(exc))
    return Unbound()
