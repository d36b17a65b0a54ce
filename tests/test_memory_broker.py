"""Tests for the in-memory reference broker."""
import threading

import pytest

from broker_api.core.catalog import DEFAULT_CATALOG
from broker_api.core.exceptions import (
    BindingAlreadyExistsError,
    BindingDoesNotExistError,
    InstanceAlreadyExistsError,
    InstanceDoesNotExistError,
    InstanceLimitReachedError,
)
from broker_api.core.memory_broker import InMemoryServiceBroker


@pytest.fixture()
def broker():
    return InMemoryServiceBroker(instance_limit=2, dashboard_url_base="https://dash.example.com/")


def test_catalog_defaults_to_builtin():
    assert InMemoryServiceBroker().catalog() == DEFAULT_CATALOG


def test_catalog_is_returned_as_given():
    catalog = {"services": [{"id": "svc", "name": "svc", "plans": []}]}
    assert InMemoryServiceBroker(catalog=catalog).catalog() is catalog


def test_provision_returns_dashboard_url(broker):
    assert broker.provision("i-1") == "https://dash.example.com/instances/i-1"
    assert broker.instance_ids() == ["i-1"]


def test_provision_without_dashboard_base_returns_empty_url():
    assert InMemoryServiceBroker().provision("i-1") == ""


def test_provision_twice_raises_already_exists(broker):
    broker.provision("i-1")
    with pytest.raises(InstanceAlreadyExistsError):
        broker.provision("i-1")


def test_provision_past_limit_raises(broker):
    broker.provision("i-1")
    broker.provision("i-2")
    with pytest.raises(InstanceLimitReachedError):
        broker.provision("i-3")


def test_zero_limit_means_unlimited():
    broker = InMemoryServiceBroker(instance_limit=0)
    for index in range(50):
        broker.provision(f"i-{index}")
    assert len(broker.instance_ids()) == 50


def test_negative_limit_rejected():
    with pytest.raises(ValueError):
        InMemoryServiceBroker(instance_limit=-1)


def test_deprovision_frees_a_slot(broker):
    broker.provision("i-1")
    broker.provision("i-2")
    broker.deprovision("i-1")
    broker.provision("i-3")
    assert sorted(broker.instance_ids()) == ["i-2", "i-3"]


def test_deprovision_unknown_instance_raises(broker):
    with pytest.raises(InstanceDoesNotExistError):
        broker.deprovision("missing")


def test_bind_returns_credentials(broker):
    broker.provision("i-1")
    result = broker.bind("i-1", "b-1")
    assert result["credentials"]["uri"] == "memory://i-1"
    assert result["credentials"]["username"] == "b-1"
    assert result["credentials"]["password"]
    assert broker.binding_ids("i-1") == ["b-1"]


def test_bind_unknown_instance_raises(broker):
    with pytest.raises(InstanceDoesNotExistError):
        broker.bind("missing", "b-1")


def test_bind_twice_raises(broker):
    broker.provision("i-1")
    broker.bind("i-1", "b-1")
    with pytest.raises(BindingAlreadyExistsError):
        broker.bind("i-1", "b-1")


def test_unbind_removes_binding(broker):
    broker.provision("i-1")
    broker.bind("i-1", "b-1")
    broker.unbind("i-1", "b-1")
    assert broker.binding_ids("i-1") == []


def test_unbind_errors(broker):
    with pytest.raises(InstanceDoesNotExistError):
        broker.unbind("missing", "b-1")
    broker.provision("i-1")
    with pytest.raises(BindingDoesNotExistError):
        broker.unbind("i-1", "b-1")


def test_deprovision_drops_bindings(broker):
    broker.provision("i-1")
    broker.bind("i-1", "b-1")
    broker.deprovision("i-1")
    broker.provision("i-1")
    assert broker.binding_ids("i-1") == []


def test_concurrent_provision_of_same_id_succeeds_once():
    broker = InMemoryServiceBroker()
    results = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        try:
            broker.provision("shared")
            results.append("ok")
        except InstanceAlreadyExistsError:
            results.append("exists")

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results.count("ok") == 1
    assert results.count("exists") == 7
