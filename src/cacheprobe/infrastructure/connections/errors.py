# src/cacheprobe/infrastructure/connections/errors.py
"""Classify cache client errors into troubleshooting diagnostics."""

import errno
import re
import socket
from typing import Any, Dict, Iterator, Optional

from redis.exceptions import AuthenticationError, ResponseError
from redis.exceptions import TimeoutError as RedisTimeoutError

# redis-py formats OS errors as "Error 111 connecting to host:port. ..."
_ERRNO_IN_MESSAGE = re.compile(r"Error (-?\d+)")


def _exception_chain(exc: BaseException) -> Iterator[BaseException]:
    seen = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def error_code(exc: BaseException) -> Optional[str]:
    """Best-effort symbolic code for a cache error, None when unknown."""
    for e in _exception_chain(exc):
        if isinstance(e, AuthenticationError):
            return "WRONGPASS" if "WRONGPASS" in str(e) else "NOAUTH"
        if isinstance(e, ResponseError) and str(e).startswith("NOAUTH"):
            return "NOAUTH"
        if isinstance(e, socket.gaierror):
            return "ENOTFOUND"
        if isinstance(e, (RedisTimeoutError, TimeoutError, socket.timeout)):
            return "ETIMEDOUT"
        if isinstance(e, OSError) and e.errno in errno.errorcode:
            return errno.errorcode[e.errno]

    match = _ERRNO_IN_MESSAGE.search(str(exc))
    if match:
        code = int(match.group(1))
        if code in errno.errorcode:
            return errno.errorcode[code]
        # getaddrinfo failures use negative EAI_* codes
        if code < 0:
            return "ENOTFOUND"
    # asyncio folds per-address failures into one errno-less OSError
    if "Connection refused" in str(exc):
        return "ECONNREFUSED"
    return None


def describe_error(exc: BaseException) -> Dict[str, Any]:
    """Message, code and class name of an error, for JSON responses."""
    return {
        "error": str(exc) or exc.__class__.__name__,
        "error_code": error_code(exc),
        "error_type": exc.__class__.__name__,
    }
