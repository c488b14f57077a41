"""
Error codes bounded context, application layer.

Use cases that resolve error codes for internal or external audiences.
"""
