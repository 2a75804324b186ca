# Trace correlation: the active OpenTelemetry span as extras.

from __future__ import annotations
from opentelemetry import trace

from .extras import Pairs

def trace_context() -> Pairs:
    """trace_id/span_id of the current span, hex encoded; empty outside a valid span.

        log.info(chain(trace_context(), {"symbol": "AAPL"}), "signals.emit")
    """
    ctx = trace.get_current_span().get_span_context()
    if not ctx.is_valid:
        return Pairs()
    return Pairs([
        ("trace_id", trace.format_trace_id(ctx.trace_id)),
        ("span_id", trace.format_span_id(ctx.span_id)),
    ])
