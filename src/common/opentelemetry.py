import logging
from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource, SERVICE_NAME
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor  # type: ignore
from opentelemetry.instrumentation.redis import RedisInstrumentor  # type: ignore
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor  # type: ignore

from src.config import Settings

logger = logging.getLogger(__name__)


def setup_opentelemetry(settings: Settings, app: FastAPI) -> None:
    logger.info("Setting up instrumentation...")

    resource = Resource(attributes={SERVICE_NAME: settings.OTEL_SERVICE_NAME})
    trace_provider = TracerProvider(resource=resource)
    trace.set_tracer_provider(trace_provider)

    trace_provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter()))

    FastAPIInstrumentor.instrument_app(app)  # type: ignore
    logger.info("FastAPI Instrumentation enabled.")

    # Only the configured task store backend is traced
    if settings.TASK_STORE_BACKEND == "redis":
        RedisInstrumentor().instrument()
        logger.info("Redis Instrumentation enabled.")
    else:
        SQLAlchemyInstrumentor().instrument()
        logger.info("SQLAlchemy Instrumentation enabled.")
