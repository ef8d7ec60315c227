"""RPC-facing shape of external user records.

Read-only views of a third-party resource; they are never merged with
local directory users. Every optional string is `str | None` so absence
stays representable even though the source always sends a value.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Geo(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: str | None = None
    lng: str | None = None


class Address(BaseModel):
    model_config = ConfigDict(frozen=True)

    street: str | None = None
    suite: str | None = None
    city: str | None = None
    zipcode: str | None = None
    geo: Geo | None = None


class Company(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    catch_phrase: str | None = None
    bs: str | None = None


class ExternalUser(BaseModel):
    """A user from the external REST API.

    Attributes:
        id: Decimal string form of the source's integer id
        name: Full name
        username: Handle
        email: Contact email
        phone: Optional phone number
        website: Optional website
        address: Optional postal address with coordinates
        company: Optional employer
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    username: str = ""
    email: str = ""
    phone: str | None = None
    website: str | None = None
    address: Address | None = None
    company: Company | None = None
