"""Client stub for `service.UsersService`."""

from __future__ import annotations

import grpc

from plugin.codec import deserializer, serialize
from plugin.messages import SERVICE_NAME, USERS_SERVICE_METHODS


class UsersServiceStub:
    """Exposes one callable per RPC method, named after the method.

    Example:
        with grpc.insecure_channel("localhost:50051") as channel:
            stub = UsersServiceStub(channel)
            response = stub.QueryUser(QueryUserRequest(id="1"))
    """

    def __init__(self, channel: grpc.Channel):
        for name, (_, response_type) in USERS_SERVICE_METHODS.items():
            setattr(
                self,
                name,
                channel.unary_unary(
                    f"/{SERVICE_NAME}/{name}",
                    request_serializer=serialize,
                    response_deserializer=deserializer(response_type),
                ),
            )
