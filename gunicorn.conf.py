"""Gunicorn configuration for the service broker API.

Run with:
    gunicorn -c gunicorn.conf.py broker_api.flask_app:app

Worker count defaults to 1: the default in-memory broker keeps its state in
the worker process, so several workers would each see different instances.
"""
import os

bind = os.environ.get("BROKER_BIND", "0.0.0.0:5000")
workers = int(os.environ.get("GUNICORN_WORKERS", "1"))
accesslog = "-"
errorlog = "-"


def post_fork(server, worker):
    """Called just after a worker has been forked."""
    worker.log.info(f"Broker worker started (pid={worker.pid})")
    if workers > 1:
        worker.log.warning(
            "Multiple workers with the in-memory broker: each worker holds its own instances"
        )
