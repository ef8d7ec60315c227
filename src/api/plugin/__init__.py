"""Plugin presentation layer.

Exposes the Directory and External contexts as the `service.UsersService`
gRPC service, plus an HTTP mirror of the same operations.
"""
