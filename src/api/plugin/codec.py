"""Wire codec for RPC messages: pydantic models encoded as UTF-8 JSON."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from pydantic import BaseModel

M = TypeVar("M", bound=BaseModel)


def serialize(message: BaseModel) -> bytes:
    return message.model_dump_json().encode("utf-8")


def deserializer(message_type: type[M]) -> Callable[[bytes], M]:
    """Return a function decoding bytes into `message_type`.

    An empty payload decodes as an empty object, so messages without
    required fields can be sent with no body. Invalid payloads raise
    pydantic's ValidationError, which gRPC reports as a failed call.
    """

    def decode(payload: bytes) -> M:
        return message_type.model_validate_json(payload or b"{}")

    return decode
