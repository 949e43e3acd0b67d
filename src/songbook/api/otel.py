"""
OpenTelemetry instrumentation setup for the Songbook API.

Traces are exported over OTLP to the configured monitoring endpoint, with the
monitoring API key sent as the ``x-api-key`` header. Tracing stays disabled
when no key is configured.
"""

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from ..config import Settings
from ..logging import get_logger

logger = get_logger(__name__)


def setup_opentelemetry(app: FastAPI, settings: Settings) -> TracerProvider | None:
    """Configure OpenTelemetry instrumentation for the FastAPI application.

    Returns the configured tracer provider, or None when monitoring is disabled.
    """
    if not settings.monitoring_api_key:
        logger.debug("OpenTelemetry instrumentation disabled")
        return None

    try:
        resource = Resource.create({SERVICE_NAME: settings.service_name})
        tracer_provider = TracerProvider(resource=resource)

        exporter = OTLPSpanExporter(
            endpoint=settings.monitoring_endpoint,
            headers=(("x-api-key", settings.monitoring_api_key),),
        )
        tracer_provider.add_span_processor(BatchSpanProcessor(exporter))
        trace.set_tracer_provider(tracer_provider)

        FastAPIInstrumentor.instrument_app(
            app,
            tracer_provider=tracer_provider,
            excluded_urls="health",
        )

        logger.info(
            "OpenTelemetry configured for OTLP",
            endpoint=settings.monitoring_endpoint,
            service_name=settings.service_name,
        )
        return tracer_provider
    except Exception as e:
        logger.error("Failed to initialize OpenTelemetry", error=str(e))
        return None
