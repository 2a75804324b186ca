import time
from uuid import uuid4

from opentelemetry import trace
from opentelemetry.trace import NonRecordingSpan, SpanContext, TraceFlags

from bunyan_log import chain, create
from bunyan_log.otel import trace_context

def main():
    log = create("py-producer")
    # stand-in for a span started by an instrumented bus client
    ctx = SpanContext(
        trace_id=uuid4().int, span_id=uuid4().int >> 64,
        is_remote=False, trace_flags=TraceFlags(TraceFlags.SAMPLED),
    )
    with trace.use_span(NonRecordingSpan(ctx)):
        log.info(chain(trace_context(), {"event": "signals.emit", "symbol": "AAPL"}), "publishing signal")
        time.sleep(0.1)
    log.info(trace_context(), "outside any span")

if __name__ == "__main__":
    main()
