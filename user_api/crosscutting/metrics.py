"""
===============================================================================
ARCHIVO: crosscutting/metrics.py
===============================================================================

CRC CARD (Módulo)
-------------------------------------------------------------------------------
Nombre:
    Métricas (Prometheus)

Responsabilidades:
    - Definir métricas Prometheus en un registry propio.
    - Proveer funciones pequeñas y estables para registrar eventos/duraciones.
    - Cuidar cardinalidad (NO user_id ni IDs dinámicos en labels).
    - Exponer helpers para generar la respuesta /metrics.

Colaboradores:
    - crosscutting.middleware: registra latencia y conteo HTTP.
    - application/usecases/users: registra eventos de ciclo de vida de usuarios.
    - api/main.py: endpoint /metrics.
===============================================================================
"""

from __future__ import annotations

import re

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

_registry = CollectorRegistry()

_requests_total = Counter(
    "user_api_requests_total",
    "Total de requests HTTP",
    ["endpoint", "method", "status"],
    registry=_registry,
)

_request_latency = Histogram(
    "user_api_request_latency_seconds",
    "Latencia de requests HTTP (segundos)",
    ["endpoint", "method"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
    registry=_registry,
)

_user_events_total = Counter(
    "user_api_user_events_total",
    "Eventos de ciclo de vida de usuarios",
    ["event"],
    registry=_registry,
)

# R: /v1/users/42/suspend -> /v1/users/{id}/suspend (evita explosión de series).
_NUMERIC_SEGMENT = re.compile(r"/\d+(?=/|$)")


def normalize_endpoint(path: str) -> str:
    """Reemplaza segmentos numéricos del path por {id}."""
    return _NUMERIC_SEGMENT.sub("/{id}", path or "/")


def record_request_metrics(
    *, endpoint: str, method: str, status_code: int, latency_seconds: float
) -> None:
    normalized = normalize_endpoint(endpoint)
    _requests_total.labels(
        endpoint=normalized, method=method, status=str(status_code)
    ).inc()
    _request_latency.labels(endpoint=normalized, method=method).observe(
        latency_seconds
    )


def record_user_event(event: str) -> None:
    """Ej: created, suspended, deactivated, activated, updated, password_changed."""
    _user_events_total.labels(event=event).inc()


def get_metrics_response() -> tuple[bytes, str]:
    """Devuelve (body, content_type) listo para /metrics."""
    return generate_latest(_registry), CONTENT_TYPE_LATEST
