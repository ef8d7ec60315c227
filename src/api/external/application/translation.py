"""Translation from the third-party REST schema to the RPC-facing shape."""

from __future__ import annotations

from external.domain.value_objects import Address, Company, ExternalUser, Geo
from external.ports.jsonplaceholder_models import JsonPlaceholderUser


def to_external_user(source: JsonPlaceholderUser) -> ExternalUser:
    """Translate one REST user field by field.

    The integer id becomes its decimal string and every optional string is
    carried over as-is (wrapped, never dropped).
    """
    address = source.address
    company = source.company
    return ExternalUser(
        id=str(source.id),
        name=source.name,
        username=source.username,
        email=source.email,
        phone=source.phone,
        website=source.website,
        address=Address(
            street=address.street,
            suite=address.suite,
            city=address.city,
            zipcode=address.zipcode,
            geo=Geo(lat=address.geo.lat, lng=address.geo.lng),
        ),
        company=Company(
            name=company.name,
            catch_phrase=company.catch_phrase,
            bs=company.bs,
        ),
    )
