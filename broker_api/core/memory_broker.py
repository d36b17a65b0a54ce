"""In-memory service broker.

Reference ``ServiceBroker`` used when the application is started without an
injected broker. State lives in the process, so every gunicorn worker holds
its own instances and bindings.
"""
from __future__ import annotations
import secrets
import threading
from typing import Any, Dict, List, Optional

from broker_api.core.broker import ServiceBroker
from broker_api.core.catalog import default_catalog
from broker_api.core.exceptions import (
    BindingAlreadyExistsError,
    BindingDoesNotExistError,
    InstanceAlreadyExistsError,
    InstanceDoesNotExistError,
    InstanceLimitReachedError,
)


class InMemoryServiceBroker(ServiceBroker):
    """Thread-safe broker keeping instances and bindings in dictionaries.

    Args:
        catalog: Catalog document returned by ``catalog()`` (default: built-in)
        instance_limit: Maximum number of live instances; 0 disables the limit
        dashboard_url_base: Base URL for instance dashboards; empty gives ""
    """

    def __init__(
        self,
        catalog: Optional[Dict[str, Any]] = None,
        instance_limit: int = 0,
        dashboard_url_base: str = "",
    ):
        if instance_limit < 0:
            raise ValueError("instance_limit must be >= 0")
        self._catalog = catalog if catalog is not None else default_catalog()
        self.instance_limit = instance_limit
        self.dashboard_url_base = dashboard_url_base.rstrip("/")
        self._instances: Dict[str, Dict[str, Dict[str, str]]] = {}
        self._lock = threading.Lock()

    def catalog(self) -> Dict[str, Any]:
        return self._catalog

    def provision(self, instance_id: str) -> str:
        with self._lock:
            if instance_id in self._instances:
                raise InstanceAlreadyExistsError()
            if self.instance_limit and len(self._instances) >= self.instance_limit:
                raise InstanceLimitReachedError()
            self._instances[instance_id] = {}
        return self._dashboard_url(instance_id)

    def deprovision(self, instance_id: str) -> None:
        with self._lock:
            if instance_id not in self._instances:
                raise InstanceDoesNotExistError()
            # Bindings go with their instance
            del self._instances[instance_id]

    def bind(self, instance_id: str, binding_id: str) -> Dict[str, Any]:
        with self._lock:
            bindings = self._instances.get(instance_id)
            if bindings is None:
                raise InstanceDoesNotExistError()
            if binding_id in bindings:
                raise BindingAlreadyExistsError()
            credentials = {
                "uri": f"memory://{instance_id}",
                "username": binding_id,
                "password": secrets.token_urlsafe(16),
            }
            bindings[binding_id] = credentials
        return {"credentials": dict(credentials)}

    def unbind(self, instance_id: str, binding_id: str) -> None:
        with self._lock:
            bindings = self._instances.get(instance_id)
            if bindings is None:
                raise InstanceDoesNotExistError()
            if binding_id not in bindings:
                raise BindingDoesNotExistError()
            del bindings[binding_id]

    def instance_ids(self) -> List[str]:
        """Return the ids of all live instances."""
        with self._lock:
            return list(self._instances)

    def binding_ids(self, instance_id: str) -> List[str]:
        """Return the binding ids of an instance.

        Raises:
            InstanceDoesNotExistError: instance id unknown
        """
        with self._lock:
            bindings = self._instances.get(instance_id)
            if bindings is None:
                raise InstanceDoesNotExistError()
            return list(bindings)

    def _dashboard_url(self, instance_id: str) -> str:
        if not self.dashboard_url_base:
            return ""
        return f"{self.dashboard_url_base}/instances/{instance_id}"
