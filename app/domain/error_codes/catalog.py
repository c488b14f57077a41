"""
Standard error code catalog.

API and service errors should converge on the codes defined here.

Ranges:
    0              success
    10000 - 10999  service-internal errors (hidden from API clients up to
                   the internal error limit)
    11000 - 11999  common business errors
    12000 - 12111  market data errors

HTTP-level descriptors are created but not registered:
they travel with their own HTTP status and never go through lookup.
"""

from app.domain.error_codes.entities import ErrorDescriptor
from app.domain.error_codes.registry import (
    DEFAULT_FALLBACK,
    DEFAULT_INTERNAL_ERROR_LIMIT,
    DEFAULT_SUCCESS,
    ErrorRegistry,
)

ERR_CODE_BAD_REQUEST = 400
ERR_CODE_FORBIDDEN = 403
ERR_CODE_VALIDATE_ERR = 422
ERR_CODE_TOO_MANY_REQUEST = 249
ERR_CODE_INTERNAL_SERVER_ERROR = 500
ERR_CODE_INVALID_HTTP_METHOD = 405

OK = DEFAULT_SUCCESS

# 10000 ~ 10999 service-internal
UNKNOWN = DEFAULT_FALLBACK
DB_NOT_FOUND = ErrorDescriptor(10001, "Record Not Found")
RPC_FAILED = ErrorDescriptor(10002, "RPC Failed")
RPC_RES_CONVERT_FAILED = ErrorDescriptor(10003, "RPC Res Convert failed")
JSON_MARSHAL_FAILED = ErrorDescriptor(10004, "JSON Marshal Failed")
JSON_UNMARSHAL_FAILED = ErrorDescriptor(10005, "JSON Unmarshal failed")
DB_ERROR = ErrorDescriptor(10006, "DB Error")
PACK_ERROR = ErrorDescriptor(10007, "Pack Error")
GET_LOCK_FAILED = ErrorDescriptor(10008, "Get Lock Failed")

# 11000 ~ 11999 common business
PARAM_WRONG = ErrorDescriptor(11001, "invalid param")
SESSION_EXPIRED = ErrorDescriptor(11002, "no_login")
NO_PERMISSION = ErrorDescriptor(11003, "no_permission")
DUP_OPER = ErrorDescriptor(11004, "dup operation")
GEN_ID_FAILED = ErrorDescriptor(11005, "gen id failed")
MUST_LOGIN = ErrorDescriptor(11006, "Must Login")

# 12000 ~ 12111 market data
INVALID_SYMBOL = ErrorDescriptor(12000, "invalid symbol")
SYMBOL_LOAD_FAILED = ErrorDescriptor(12001, "unable to get snapshot E3020")
ACCOUNT_LOAD_FAILED = ErrorDescriptor(12002, "unable to get snapshot E3021")

# HTTP errors, not registered
HTTP_AUTH_MISSING = ErrorDescriptor(ERR_CODE_BAD_REQUEST, "Authorization header is missing")
HTTP_TOKEN_BEARER_MISSING = ErrorDescriptor(ERR_CODE_BAD_REQUEST, "Bearer is missing")
HTTP_TOKEN_BEARER_BASE64 = ErrorDescriptor(
    ERR_CODE_BAD_REQUEST, "Bearer is not properly encoded in base64"
)
HTTP_INVALID_TOKEN = ErrorDescriptor(ERR_CODE_BAD_REQUEST, "invalid token")
HTTP_CONFIRMED_DEVICE_NOT_MATCH = ErrorDescriptor(
    ERR_CODE_BAD_REQUEST, "confirmed device not match"
)
HTTP_TOKEN_DECODE_ERROR = ErrorDescriptor(ERR_CODE_BAD_REQUEST, "token decode failed")

REGISTERED = (
    OK,
    UNKNOWN,
    DB_NOT_FOUND,
    RPC_FAILED,
    RPC_RES_CONVERT_FAILED,
    JSON_MARSHAL_FAILED,
    JSON_UNMARSHAL_FAILED,
    DB_ERROR,
    PACK_ERROR,
    GET_LOCK_FAILED,
    PARAM_WRONG,
    SESSION_EXPIRED,
    NO_PERMISSION,
    DUP_OPER,
    GEN_ID_FAILED,
    MUST_LOGIN,
    INVALID_SYMBOL,
    SYMBOL_LOAD_FAILED,
    ACCOUNT_LOAD_FAILED,
)


def build_registry(
    internal_error_limit: int = DEFAULT_INTERNAL_ERROR_LIMIT,
    strict: bool = True,
) -> ErrorRegistry:
    """Create a registry populated with the standard catalog.

    Args:
        internal_error_limit: Inclusive boundary of internal-only codes.
        strict: Fail on duplicate codes instead of warning.

    Returns:
        A new registry; callers own it and pass it to request code.

    Raises:
        DuplicateErrorCodeError: ``strict`` and the catalog reuses a code.
    """
    registry = ErrorRegistry(
        internal_error_limit=internal_error_limit,
        fallback=UNKNOWN,
        success=OK,
        strict=strict,
    )
    registry.register_all(REGISTERED)
    return registry
