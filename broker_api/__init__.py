"""Open Service Broker API adapter.

To use the Flask app:
    from broker_api.flask_app import create_app
    app = create_app(broker=my_broker)

To implement a broker:
    from broker_api.core.broker import ServiceBroker
    from broker_api.core.exceptions import InstanceAlreadyExistsError
"""
# Note: We don't import flask_app by default; importing it builds the
# module-level gunicorn app from the environment.
