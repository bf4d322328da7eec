"""
Request tracing middleware.

Gives every request a trace id and a start time, and makes the trace id
visible to logging for the duration of the request.
"""

import time
import uuid
from fastapi import Request

from constants import TRACE_ID_HEADER
from utils.error_handlers import unhandled_error_handler
from utils.logging_utils import set_logging_context, clear_logging_context


def new_trace_id() -> str:
    return uuid.uuid4().hex


async def trace_requests(request: Request, call_next):
    """
    HTTP middleware: stamp request.state with trace_id/start_time.

    An incoming X-Trace-Id header is reused so callers can correlate across
    services; otherwise a fresh id is generated. The id is echoed back on the
    response, including 500 responses for errors no other handler caught.
    """
    request.state.start_time = time.perf_counter()
    trace_id = request.headers.get(TRACE_ID_HEADER) or new_trace_id()
    request.state.trace_id = trace_id

    set_logging_context(trace_id=trace_id)
    try:
        response = await call_next(request)
    except Exception as exc:
        # Starlette serves the Exception handler outside this middleware
        response = await unhandled_error_handler(request, exc)
    finally:
        clear_logging_context()

    response.headers[TRACE_ID_HEADER] = trace_id
    return response
