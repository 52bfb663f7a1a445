"""
OpenTelemetry tracing for the marketplace API.

Spans come from three places:
- FastAPIInstrumentor, one server span per request (health and metrics excluded)
- SQLAlchemyInstrumentor, one span per statement on the async engine's sync core
- Manual spans opened by the checkout coordinator and a few controllers

Export goes to OTLP when OTEL_EXPORTER_OTLP_ENDPOINT is set. Without an
endpoint spans are still recorded so trace ids propagate, but nothing leaves
the process.
"""

from typing import Optional

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import (
    DEPLOYMENT_ENVIRONMENT,
    SERVICE_NAME,
    SERVICE_VERSION,
    Resource,
)
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased
from sqlalchemy.ext.asyncio import AsyncEngine

from src.platform.config.core_setting import settings


UNTRACED_URLS = 'health,metrics'


class TracingConfig:
    """
    Usage:
        tracing = TracingConfig()
        tracing.setup()
        tracing.instrument_sqlalchemy(engine=get_engine())
        ...
        tracing.shutdown()
    """

    def __init__(
        self,
        *,
        service_name: Optional[str] = None,
        otlp_endpoint: Optional[str] = None,
        sample_ratio: Optional[float] = None,
    ) -> None:
        self.service_name = service_name or settings.SERVICE_NAME
        self.otlp_endpoint = otlp_endpoint or settings.OTEL_EXPORTER_OTLP_ENDPOINT
        self.sample_ratio = settings.TRACE_SAMPLE_RATIO if sample_ratio is None else sample_ratio
        self._provider: TracerProvider | None = None

    def setup(self) -> None:
        resource = Resource.create(
            {
                SERVICE_NAME: self.service_name,
                SERVICE_VERSION: settings.VERSION,
                DEPLOYMENT_ENVIRONMENT: settings.DEPLOY_ENV,
            }
        )
        # Honour the caller's sampling decision, sample root spans by ratio
        self._provider = TracerProvider(
            resource=resource, sampler=ParentBased(TraceIdRatioBased(self.sample_ratio))
        )

        if self.otlp_endpoint:
            self._provider.add_span_processor(
                BatchSpanProcessor(OTLPSpanExporter(endpoint=self.otlp_endpoint))
            )
        if settings.OTEL_CONSOLE_EXPORT:
            self._provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

        trace.set_tracer_provider(self._provider)

    @staticmethod
    def instrument_fastapi(*, app: FastAPI) -> None:
        FastAPIInstrumentor.instrument_app(app, excluded_urls=UNTRACED_URLS)

    @staticmethod
    def instrument_sqlalchemy(*, engine: AsyncEngine) -> None:
        SQLAlchemyInstrumentor().instrument(engine=engine.sync_engine)

    def shutdown(self) -> None:
        if self._provider:
            self._provider.shutdown()
            self._provider = None
