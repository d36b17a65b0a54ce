"""Flask application factory and bootstrap.

This module provides the create_app() factory function wiring the broker,
the broker logger, the blueprints and the error handlers together.
"""
from __future__ import annotations
import logging
from typing import Optional

from flask import Flask

from broker_api.config import BrokerConfig, load_settings
from broker_api.core.broker import BrokerLogger, ServiceBroker
from broker_api.core.catalog import default_catalog, load_catalog
from broker_api.core.memory_broker import InMemoryServiceBroker

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# ─────────────────────────────────────────────────────────────────────────────
# Application Factory
# ─────────────────────────────────────────────────────────────────────────────
def create_app(
    broker: Optional[ServiceBroker] = None,
    broker_logger: Optional[BrokerLogger] = None,
    cfg: Optional[BrokerConfig] = None,
) -> Flask:
    """Create and configure Flask application.

    Args:
        broker: Broker capability (default: in-memory broker built from cfg)
        broker_logger: Sink for outcome log lines (default: logger named in cfg)
        cfg: Configuration (default: loaded from the environment)
    """
    if cfg is None:
        cfg = load_settings()
    if broker is None:
        broker = build_memory_broker(cfg)
    if broker_logger is None:
        broker_logger = configure_broker_logger(cfg)

    app = Flask(__name__)
    app.config["BROKER_CONFIG"] = cfg

    # Catalog is served as the broker returns it
    app.json.sort_keys = False

    # Register blueprints
    from broker_api.api import errors, health
    from broker_api.api.catalog import create_catalog_blueprint
    from broker_api.api.service_instances import create_service_instances_blueprint

    app.register_blueprint(create_catalog_blueprint(broker), url_prefix="/v2")
    app.register_blueprint(create_service_instances_blueprint(broker, broker_logger), url_prefix="/v2")
    app.register_blueprint(health.bp)

    # Register error handlers
    errors.register_error_handlers(app)

    print(f"[flask_app] Broker={type(broker).__name__}")
    print("[flask_app] Service Broker API registered at /v2")

    return app


# ─────────────────────────────────────────────────────────────────────────────
# Helper Functions
# ─────────────────────────────────────────────────────────────────────────────
def build_memory_broker(cfg: BrokerConfig) -> InMemoryServiceBroker:
    """Build the in-memory broker described by the configuration."""
    catalog = load_catalog(cfg.catalog_path) if cfg.catalog_path else default_catalog()
    return InMemoryServiceBroker(
        catalog=catalog,
        instance_limit=cfg.instance_limit,
        dashboard_url_base=cfg.dashboard_url_base,
    )


def configure_broker_logger(cfg: BrokerConfig) -> logging.Logger:
    """Return the named broker logger with a stream handler attached once."""
    logger = logging.getLogger(cfg.broker_logger_name)
    logger.setLevel(cfg.log_level_value)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


# ─────────────────────────────────────────────────────────────────────────────
# Application Instance (for Gunicorn)
# ─────────────────────────────────────────────────────────────────────────────
app = create_app()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000, debug=True)
