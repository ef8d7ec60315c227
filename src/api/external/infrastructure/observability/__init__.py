"""Domain probes for External infrastructure."""

from external.infrastructure.observability.external_api_probe import (
    DefaultExternalApiProbe,
    ExternalApiProbe,
)

__all__ = [
    "DefaultExternalApiProbe",
    "ExternalApiProbe",
]
