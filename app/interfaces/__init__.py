"""
Interfaces layer package.

Contains FastAPI routers and Pydantic response schemas.
Routes resolve error codes through use cases and the shared
registry; they never touch module-level state.
"""
