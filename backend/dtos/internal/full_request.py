"""
Internal Request Context DTO

Per-request data that handlers need for logging but that has no business
meaning.
"""

import time
from dataclasses import dataclass, field


@dataclass(frozen=True)
class FullRequest:
    """
    Request context handed to route handlers.

    trace_id correlates every log line of one request; start_time is a
    time.perf_counter() reading taken when the request entered the app.
    """

    trace_id: str
    start_time: float = field(default_factory=time.perf_counter)

    def elapsed_ms(self) -> int:
        """Whole milliseconds since the request entered the app."""
        return round((time.perf_counter() - self.start_time) * 1000)
