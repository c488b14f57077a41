"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that every failure leaves the
service as an error descriptor filtered by the external-safe policy.
"""
