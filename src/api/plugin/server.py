"""gRPC server bootstrap for the users plugin.

Registers `UsersServicer` under `service.UsersService` with a generic
handler, so no generated code is needed: each method is a unary-unary
handler whose messages go through the JSON codec in `plugin.codec`.
"""

from __future__ import annotations

import signal
from collections.abc import Callable
from concurrent import futures
from typing import Any

import grpc
import structlog

from infrastructure.logging import configure_logging
from infrastructure.settings import PluginSettings, get_plugin_settings
from plugin.codec import deserializer, serialize
from plugin.dependencies import close_resources, get_users_servicer
from plugin.messages import SERVICE_NAME, USERS_SERVICE_METHODS
from plugin.observability import DefaultPluginServerProbe, PluginServerProbe
from plugin.servicer import UsersServicer
from shared_kernel.observability_context import ObservationContext

REQUEST_ID_METADATA_KEY = "x-request-id"
SHUTDOWN_GRACE_SECONDS = 5.0

Behavior = Callable[[Any, grpc.ServicerContext], Any]


def _with_call_context(method: str, behavior: Behavior) -> Behavior:
    """Bind the RPC method and caller request id into structlog contextvars."""

    def handle(request: Any, context: grpc.ServicerContext) -> Any:
        metadata = dict(context.invocation_metadata() or ())
        observation = ObservationContext(
            request_id=metadata.get(REQUEST_ID_METADATA_KEY),
            rpc_method=method,
        )
        with structlog.contextvars.bound_contextvars(**observation.as_dict()):
            return behavior(request, context)

    return handle


def build_generic_handler(servicer: UsersServicer) -> grpc.GenericRpcHandler:
    """Build the handler table for every method of the users service."""
    method_handlers = {
        name: grpc.unary_unary_rpc_method_handler(
            _with_call_context(name, getattr(servicer, name)),
            request_deserializer=deserializer(request_type),
            response_serializer=serialize,
        )
        for name, (request_type, _) in USERS_SERVICE_METHODS.items()
    }
    return grpc.method_handlers_generic_handler(SERVICE_NAME, method_handlers)


def create_server(servicer: UsersServicer, max_workers: int = 10) -> grpc.Server:
    """Create an unstarted server with the users service registered."""
    server = grpc.server(futures.ThreadPoolExecutor(max_workers=max_workers))
    server.add_generic_rpc_handlers((build_generic_handler(servicer),))
    return server


def serve(
    settings: PluginSettings | None = None,
    servicer: UsersServicer | None = None,
    probe: PluginServerProbe | None = None,
) -> tuple[grpc.Server, int]:
    """Bind and start the server.

    Args:
        settings: Server settings; loaded from the environment if omitted.
        servicer: Servicer to expose; the shared composition is used if omitted.
        probe: Optional domain probe for observability.

    Returns:
        The started server and the port it is bound to. With `grpc_port`
        set to 0 the port is chosen by the operating system.

    Raises:
        RuntimeError: If the address cannot be bound.
    """
    settings = settings or get_plugin_settings()
    servicer = servicer or get_users_servicer()
    probe = probe or DefaultPluginServerProbe()

    server = create_server(servicer, max_workers=settings.max_workers)
    port = server.add_insecure_port(settings.bind_address)
    if port == 0:
        raise RuntimeError(f"failed to bind gRPC server to {settings.bind_address}")

    server.start()
    probe.server_started(
        address=settings.grpc_host, port=port, max_workers=settings.max_workers
    )
    return server, port


def main() -> None:
    """Run the plugin server until SIGINT or SIGTERM."""
    settings = get_plugin_settings()
    configure_logging(settings.log_level)
    probe = DefaultPluginServerProbe()

    server, _ = serve(settings=settings, probe=probe)

    def shutdown(signum: int, frame: Any) -> None:
        probe.server_stopping(grace_seconds=SHUTDOWN_GRACE_SECONDS)
        server.stop(SHUTDOWN_GRACE_SECONDS)

    signal.signal(signal.SIGTERM, shutdown)
    signal.signal(signal.SIGINT, shutdown)

    try:
        server.wait_for_termination()
    finally:
        close_resources()


if __name__ == "__main__":
    main()
