"""OpenTelemetry adapter – tracer."""
from pick_request_service.adapters.opentelemetry.tracer import OtelTracer

__all__ = ["OtelTracer"]
