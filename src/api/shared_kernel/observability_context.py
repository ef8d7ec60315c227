"""Observation context for domain-oriented observability.

Observation contexts collect and manage contextual metadata for instrumentation,
following the Domain Oriented Observability pattern.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ObservationContext:
    """Immutable context containing metadata for observability.

    Captures call-scoped metadata that should be included with all
    instrumentation events, so that events emitted by different probes
    during one RPC can be correlated.

    Attributes:
        request_id: Identifier of the current call (if the caller sent one).
        rpc_method: Name of the RPC or HTTP route being served.

    Example:
        context = ObservationContext(request_id="req-123", rpc_method="QueryUser")
        with structlog.contextvars.bound_contextvars(**context.as_dict()):
            ...  # every event logged here carries both fields
    """

    request_id: str | None = None
    rpc_method: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Convert context to a dictionary for logging.

        Only includes non-None values to keep logs clean.
        """
        result: dict[str, Any] = {}
        if self.request_id is not None:
            result["request_id"] = self.request_id
        if self.rpc_method is not None:
            result["rpc_method"] = self.rpc_method
        return result
