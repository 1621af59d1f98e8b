from fastapi import FastAPI
from prometheus_client.registry import CollectorRegistry as Registry
from prometheus_client import Gauge
from prometheus_fastapi_instrumentator import Instrumentator
from devport.core.logging import log

# Create a separate registry
registry = Registry()

relay_connections = Gauge(
    'devport_relay_connections',
    'Number of open WebSocket relay connections',
    registry=registry
)


def set_relay_connections(n: int):
    """Sets the value of the relay connections gauge."""
    relay_connections.set(n)


def register_monitoring(app: FastAPI):
    """
    Registers Prometheus monitoring on the FastAPI app and exposes /metrics.
    """
    instrumentator = Instrumentator(
        excluded_handlers=["/metrics"],
        registry=registry
    ).instrument(app)

    instrumentator.expose(app, include_in_schema=False, should_gzip=True)

    log("MONITORING", "Prometheus instrumentation registered at /metrics.")
