import inspect
import logging
from functools import wraps
from typing import Any, Callable, Optional

from opentelemetry import trace

logger = logging.getLogger(__name__)

_tracer_instance: Optional[trace.Tracer] = None


def get_tracer() -> trace.Tracer:
    """Lazily initializes and returns the tracer instance."""
    global _tracer_instance
    if _tracer_instance is None:
        _tracer_instance = trace.get_tracer("httpbridge")
    return _tracer_instance


def traced(
    name: Optional[str] = None, run_type: Optional[str] = None
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Run the decorated function inside an OpenTelemetry span.

    Exceptions are recorded on the span and re-raised. Works for plain and
    ``async`` functions. Without a configured tracer provider the span is a
    no-op.

    Args:
        name: Span name, defaults to the function name.
        run_type: Optional category stored as the ``run_type`` attribute.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        span_name = name or func.__name__

        if inspect.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                with get_tracer().start_as_current_span(span_name) as span:
                    if run_type:
                        span.set_attribute("run_type", run_type)
                    return await func(*args, **kwargs)

            return async_wrapper

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            with get_tracer().start_as_current_span(span_name) as span:
                if run_type:
                    span.set_attribute("run_type", run_type)
                return func(*args, **kwargs)

        return sync_wrapper

    return decorator
