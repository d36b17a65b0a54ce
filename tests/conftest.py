"""Pytest shared fixtures for broker API tests."""
import pathlib
import sys
from typing import Optional

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests

from broker_api.config import BrokerConfig
from broker_api.core.broker import ServiceBroker
from broker_api.core.catalog import default_catalog
from broker_api.core.exceptions import InstanceAlreadyExistsError, InstanceLimitReachedError
from broker_api.flask_app import create_app


# ─────────────────────────────────────────────────────────────────────────────
# Test Doubles
# ─────────────────────────────────────────────────────────────────────────────
class FakeServiceBroker(ServiceBroker):
    """Broker double recording every call.

    Provision raises ``provision_error`` when set, and otherwise enforces
    ``instance_limit`` and duplicate ids like a real broker would. The other
    operations raise their configured error or succeed.
    """

    def __init__(self, instance_limit: int = 3):
        self.instance_limit = instance_limit
        self.provisioned_instance_ids: list[str] = []
        self.deprovisioned_instance_ids: list[str] = []
        self.bound_instance_ids: list[str] = []
        self.bound_binding_ids: list[str] = []
        self.unbound_binding_ids: list[str] = []
        self.provision_error: Optional[Exception] = None
        self.deprovision_error: Optional[Exception] = None
        self.bind_error: Optional[Exception] = None
        self.unbind_error: Optional[Exception] = None
        self.dashboard_url = "http://dashboard.example.com/instances/1"
        self.credentials = {
            "credentials": {"uri": "mysql://user:pass@db:3306/app", "username": "user", "password": "pass"}
        }

    def catalog(self):
        return default_catalog()

    def provision(self, instance_id):
        if self.provision_error is not None:
            raise self.provision_error
        if instance_id in self.provisioned_instance_ids:
            raise InstanceAlreadyExistsError()
        if len(self.provisioned_instance_ids) >= self.instance_limit:
            raise InstanceLimitReachedError()
        self.provisioned_instance_ids.append(instance_id)
        return self.dashboard_url

    def deprovision(self, instance_id):
        self.deprovisioned_instance_ids.append(instance_id)
        if self.deprovision_error is not None:
            raise self.deprovision_error

    def bind(self, instance_id, binding_id):
        self.bound_instance_ids.append(instance_id)
        self.bound_binding_ids.append(binding_id)
        if self.bind_error is not None:
            raise self.bind_error
        return self.credentials

    def unbind(self, instance_id, binding_id):
        self.unbound_binding_ids.append(binding_id)
        if self.unbind_error is not None:
            raise self.unbind_error


class RecordingLogger:
    """Broker logger collecting error lines."""

    def __init__(self):
        self.records: list[str] = []

    def error(self, message):
        self.records.append(message)


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _block_network(monkeypatch):
    """Prevent tests from issuing real HTTP requests."""

    def _blocked(method, url, *args, **kwargs):
        raise RuntimeError(f"Unexpected HTTP {method} in unit test: {url}")

    monkeypatch.setattr(requests, "request", _blocked)


# ─────────────────────────────────────────────────────────────────────────────
# Flask Test Client
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture()
def fake_broker():
    return FakeServiceBroker(instance_limit=3)


@pytest.fixture()
def sink():
    return RecordingLogger()


@pytest.fixture()
def broker_config():
    return BrokerConfig(instance_limit=3, dashboard_url_base="http://dashboard.example.com")


@pytest.fixture()
def client(fake_broker, sink, broker_config):
    """Flask test client around the fake broker and recording logger."""
    flask_app = create_app(broker=fake_broker, broker_logger=sink, cfg=broker_config)
    flask_app.config.update(TESTING=True)
    with flask_app.test_client() as client:
        yield client
