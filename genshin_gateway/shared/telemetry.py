# genshin_gateway/shared/telemetry.py
"""
Tracing for the gateway.

With an OTLP endpoint configured, one request produces three nested spans:

    GET /{path:path}                (FastAPI instrumentation)
      use_case.relay_upstream       (RelayUpstream, via `get_tracer`)
        GET raw.githubusercontent…  (httpx instrumentation, the upstream fetch)

Without an endpoint nothing is installed and `get_tracer` hands out the
no-op tracer, so spans cost nothing.
"""

from typing import Optional

import structlog
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from genshin_gateway import __version__
from genshin_gateway.shared.config import settings

logger = structlog.get_logger()


def build_resource(service_name: str) -> Resource:
    """Service identity plus the two upstream repositories this deployment reads."""
    return Resource.create(attributes={
        "service.name": service_name,
        "service.version": __version__,
        "deployment.environment": settings.APP_ENV.value,
        "gateway.data_repo": settings.DATA_REPO_URL,
        "gateway.dist_repo": settings.DIST_REPO_URL,
    })


def setup_telemetry(service_name: Optional[str] = None) -> bool:
    """
    Installs the tracer provider and instruments outbound httpx calls.
    Returns False (and installs nothing) when no OTLP endpoint is configured.
    """
    endpoint = settings.OTEL_EXPORTER_OTLP_ENDPOINT
    if not endpoint:
        logger.info("telemetry_disabled", reason="no OTEL_EXPORTER_OTLP_ENDPOINT")
        return False

    name = service_name or settings.OTEL_SERVICE_NAME
    provider = TracerProvider(resource=build_resource(name))
    provider.add_span_processor(
        BatchSpanProcessor(OTLPSpanExporter(endpoint=f"{endpoint.rstrip('/')}/v1/traces"))
    )

    if settings.DEBUG:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)

    # HttpxUpstreamClient opens a new AsyncClient per fetch; instrumenting the
    # class covers every one of them.
    HTTPXClientInstrumentor().instrument(tracer_provider=provider)

    logger.info("telemetry_enabled", service=name, endpoint=endpoint)
    return True


def instrument_fastapi(app):
    """
    Traces inbound requests. Only active alongside `setup_telemetry`.
    """
    if settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        FastAPIInstrumentor.instrument_app(app)


def get_tracer(name: str):
    return trace.get_tracer(name)
