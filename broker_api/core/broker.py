"""Broker capability interface consumed by the HTTP handlers.

A concrete broker owns every piece of instance and binding state. It reports
recognized conditions by raising the sentinel exceptions from
``broker_api.core.exceptions``; any other exception is treated as an
unexpected failure and its message is returned to the client verbatim.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, Protocol


class BrokerLogger(Protocol):
    """Sink for outcome log lines. ``logging.Logger`` satisfies it."""

    def error(self, message: str) -> None:
        ...


class ServiceBroker(ABC):
    """Abstract service broker."""

    @abstractmethod
    def catalog(self) -> Dict[str, Any]:
        """Return the service catalog document."""

    @abstractmethod
    def provision(self, instance_id: str) -> str:
        """Create an instance and return its dashboard URL (may be empty).

        Raises:
            InstanceAlreadyExistsError: instance id already provisioned
            InstanceLimitReachedError: no room for another instance
        """

    @abstractmethod
    def deprovision(self, instance_id: str) -> None:
        """Remove an instance.

        Raises:
            InstanceDoesNotExistError: instance id unknown
        """

    @abstractmethod
    def bind(self, instance_id: str, binding_id: str) -> Any:
        """Create a binding and return the credentials payload.

        Raises:
            InstanceDoesNotExistError: instance id unknown
            BindingAlreadyExistsError: binding id already in use
        """

    @abstractmethod
    def unbind(self, instance_id: str, binding_id: str) -> None:
        """Remove a binding.

        Raises:
            InstanceDoesNotExistError: instance id unknown
            BindingDoesNotExistError: binding id unknown
        """
