"""Core Broker Logic Module

This module holds everything between the HTTP layer and a concrete service
broker, independent of Flask.

Module Structure:
    - broker.py          : ServiceBroker interface and BrokerLogger protocol
    - exceptions.py      : Sentinel exceptions raised by brokers
    - outcomes.py        : Per-operation outcome types and capture functions
    - outcome_mapper.py  : Outcome → (status, body, log message)
    - catalog.py         : Catalog loading and the built-in default catalog
    - memory_broker.py   : In-memory reference broker

Usage Pattern:
    from broker_api.core import outcomes
    from broker_api.core.outcome_mapper import map_provision_outcome

    mapped = map_provision_outcome(outcomes.provision(broker, instance_id))
"""
