"""External domain module: RPC-facing external user records."""

from external.domain.value_objects import Address, Company, ExternalUser, Geo

__all__ = ["Address", "Company", "ExternalUser", "Geo"]
