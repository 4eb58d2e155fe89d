"""Error types and classification of failures."""

from __future__ import annotations

import asyncio
import concurrent.futures

_CANCELLED = (asyncio.CancelledError, concurrent.futures.CancelledError)
_RETRY_PREFIXES = ("LOADING ", "READONLY ", "CLUSTERDOWN ", "TRYAGAIN ")


class RedisError(Exception):
    """An error reply sent by the server."""


class ClientClosedError(Exception):
    """Raised for any operation on a closed client."""

    def __init__(self, message: str = "redis: client is closed") -> None:
        super().__init__(message)


def is_redis_error(err: BaseException | None) -> bool:
    """Tell whether the error is a reply from the server."""
    return isinstance(err, RedisError)


def is_loading_error(err: BaseException) -> bool:
    return str(err).startswith("LOADING ")


def is_read_only_error(err: BaseException) -> bool:
    return str(err).startswith("READONLY ")


def should_retry(err: BaseException | None, retry_timeout: bool) -> bool:
    """Tell whether a command that failed with ``err`` may be sent again."""
    if err is None or isinstance(err, _CANCELLED):
        return False
    if isinstance(err, EOFError):
        return True
    if isinstance(err, TimeoutError):
        return retry_timeout
    if isinstance(err, OSError):
        return True

    message = str(err)
    if message == "ERR max number of clients reached":
        return True
    return message.startswith(_RETRY_PREFIXES)


def is_bad_conn(err: BaseException | None, allow_timeout: bool) -> bool:
    """Tell whether the connection that produced ``err`` should be discarded."""
    if err is None:
        return False
    if isinstance(err, _CANCELLED):
        return True
    if is_redis_error(err):
        # A read-only replica may sit behind an address that now resolves elsewhere.
        return is_read_only_error(err)
    if allow_timeout and isinstance(err, TimeoutError):
        return not getattr(err, "temporary", True)
    return True


def is_moved_error(err: BaseException | None) -> tuple[bool, bool, str]:
    """Return ``(moved, ask, address)`` for a cluster redirection reply."""
    if not is_redis_error(err):
        return False, False, ""

    message = str(err)
    if message.startswith("MOVED "):
        moved, ask = True, False
    elif message.startswith("ASK "):
        moved, ask = False, True
    else:
        return False, False, ""

    _, sep, addr = message.rpartition(" ")
    if not sep:
        return False, False, ""
    return moved, ask, addr