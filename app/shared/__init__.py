"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Rendering error descriptors into HTTP responses
- Security middleware
- Rate limiting
- Logging configuration
"""
