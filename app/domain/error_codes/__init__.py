"""
Error codes bounded context, domain layer.

This module contains the error code taxonomy shared by every service
boundary:
- Immutable error descriptors (code + message)
- The registry mapping codes to descriptors
- The standard catalog registered at startup
"""
