"""Sentinel exceptions a service broker raises for recognized conditions."""
from __future__ import annotations


class BrokerError(Exception):
    """Base exception for all recognized broker conditions."""
    message = "broker error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class InstanceAlreadyExistsError(BrokerError):
    """Provisioning failed - the instance id is already in use."""
    message = "instance already exists"


class InstanceLimitReachedError(BrokerError):
    """Provisioning failed - the service cannot hold more instances."""
    message = "instance limit for this service has been reached"


class InstanceDoesNotExistError(BrokerError):
    """The instance id is unknown to the broker."""
    message = "instance does not exist"


class BindingAlreadyExistsError(BrokerError):
    """Binding failed - the binding id is already in use on the instance."""
    message = "binding already exists"


class BindingDoesNotExistError(BrokerError):
    """The binding id is unknown on the instance."""
    message = "binding does not exist"
