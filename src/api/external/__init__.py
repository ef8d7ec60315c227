"""External bounded context.

Read-only pass-through to a third-party REST API for "external" user
records, translated into the shape served over RPC.
"""
