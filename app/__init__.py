"""
Errno: shared error code registry service.

Application package root. Error conditions are reported across every
service boundary as small {code, message} descriptors drawn from one
registry, with internal codes masked before they reach API clients.

Layers:
    - domain: Descriptors, the registry, the standard catalog, errors.
    - application: Use cases resolving codes for a given audience.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
