"""Builders for connection, generic key and string commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

from .command import (
    KEEP_TTL,
    Cmdable,
    Command,
    Duration,
    _nanoseconds,
    _truncating_div,
    expand_args,
    format_ms,
    format_sec,
    use_precise,
)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_NS_PER_MS = 1_000_000
_ONE_SECOND = timedelta(seconds=1)
_ONE_MS = timedelta(milliseconds=1)


def _unix_micros(when: datetime) -> int:
    """Microseconds since the Unix epoch; naive datetimes are taken as local time."""
    aware = when if when.tzinfo is not None else when.astimezone()
    return (aware - _EPOCH) // timedelta(microseconds=1)


def _is_keep_ttl(duration: Duration) -> bool:
    return _nanoseconds(duration) == _nanoseconds(KEEP_TTL)


def _expiry_args(expiration: Duration) -> list[Any]:
    """The ``px``/``ex`` pair for a positive expiration."""
    if use_precise(expiration):
        return ["px", format_ms(expiration)]
    return ["ex", format_sec(expiration)]


@dataclass
class Sort:
    """Options of the SORT command."""

    by: str = ""
    offset: int = 0
    count: int = 0
    get: list[str] = field(default_factory=list)
    order: str = ""
    alpha: bool = False

    def to_args(self, key: str) -> list[Any]:
        """The SORT command line for ``key``."""
        args: list[Any] = ["sort", key]
        if self.by:
            args += ["by", self.by]
        if self.offset or self.count:
            args += ["limit", self.offset, self.count]
        for pattern in self.get:
            args += ["get", pattern]
        if self.order:
            args.append(self.order)
        if self.alpha:
            args.append("alpha")
        return args


@dataclass
class SetArgs:
    """Every option the SET command supports.

    A zero ``ttl`` and no ``expire_at`` mean the key has no expiration.
    ``mode`` may be ``"nx"``, ``"xx"`` or empty.
    """

    mode: str = ""
    ttl: Duration = 0
    expire_at: datetime | None = None
    get: bool = False
    keep_ttl: bool = False


class KeyCommands(Cmdable):
    """Connection, generic key and string commands."""

    def command(self) -> Command:
        return self._run("commands_info", "command")

    def client_get_name(self) -> Command:
        """The name of the connection."""
        return self._run("string", "client", "getname")

    def echo(self, message: Any) -> Command:
        return self._run("string", "echo", message)

    def ping(self) -> Command:
        return self._run("status", "ping")

    def wait(self, num_replicas: int, timeout: Duration) -> Command:
        millis = _truncating_div(_nanoseconds(timeout), _NS_PER_MS)
        return self._run("int", "wait", num_replicas, millis)

    def delete(self, *args: str) -> Command:
        return self._run("int", "del", *args)

    def unlink(self, *args: str) -> Command:
        return self._run("int", "unlink", *args)

    def dump(self, key: str) -> Command:
        return self._run("string", "dump", key)

    def exists(self, *args: str) -> Command:
        return self._run("int", "exists", *args)

    def expire(self, key: str, expiration: Duration) -> Command:
        return self._run("bool", "expire", key, format_sec(expiration))

    def expire_at(self, key: str, when: datetime) -> Command:
        return self._run("bool", "expireat", key, _unix_micros(when) // 1_000_000)

    def keys(self, pattern: str) -> Command:
        return self._run("string_slice", "keys", pattern)

    def migrate(self, host: str, port: str, key: str, db: int, timeout: Duration) -> Command:
        return self._run(
            "status",
            "migrate",
            host,
            port,
            key,
            db,
            format_ms(timeout),
            read_timeout=timeout,
        )

    def move(self, key: str, db: int) -> Command:
        return self._run("bool", "move", key, db)

    def object_ref_count(self, key: str) -> Command:
        return self._run("int", "object", "refcount", key)

    def object_encoding(self, key: str) -> Command:
        return self._run("string", "object", "encoding", key)

    def object_idle_time(self, key: str) -> Command:
        return self._run("duration", "object", "idletime", key, precision=_ONE_SECOND)

    def persist(self, key: str) -> Command:
        return self._run("bool", "persist", key)

    def pexpire(self, key: str, expiration: Duration) -> Command:
        return self._run("bool", "pexpire", key, format_ms(expiration))

    def pexpire_at(self, key: str, when: datetime) -> Command:
        millis = _truncating_div(_unix_micros(when), 1_000)
        return self._run("bool", "pexpireat", key, millis)

    def pttl(self, key: str) -> Command:
        return self._run("duration", "pttl", key, precision=_ONE_MS)

    def random_key(self) -> Command:
        return self._run("string", "randomkey")

    def rename(self, key: str, newkey: str) -> Command:
        return self._run("status", "rename", key, newkey)

    def rename_nx(self, key: str, newkey: str) -> Command:
        return self._run("bool", "renamenx", key, newkey)

    def restore(self, key: str, ttl: Duration, value: str) -> Command:
        return self._run("status", "restore", key, format_ms(ttl), value)

    def restore_replace(self, key: str, ttl: Duration, value: str) -> Command:
        return self._run("status", "restore", key, format_ms(ttl), value, "replace")

    def sort(self, key: str, sort: Sort | None = None) -> Command:
        return self._run("string_slice", *(sort or Sort()).to_args(key))

    def sort_store(self, key: str, store: str, sort: Sort | None = None) -> Command:
        args = (sort or Sort()).to_args(key)
        if store:
            args += ["store", store]
        return self._run("int", *args)

    def sort_interfaces(self, key: str, sort: Sort | None = None) -> Command:
        return self._run("slice", *(sort or Sort()).to_args(key))

    def touch(self, *args: str) -> Command:
        return self._run("int", "touch", *args)

    def ttl(self, key: str) -> Command:
        return self._run("duration", "ttl", key, precision=_ONE_SECOND)

    def type(self, key: str) -> Command:
        return self._run("status", "type", key)

    def append(self, key: str, value: str) -> Command:
        return self._run("int", "append", key, value)

    def decr(self, key: str) -> Command:
        return self._run("int", "decr", key)

    def decr_by(self, key: str, decrement: int) -> Command:
        return self._run("int", "decrby", key, decrement)

    def get(self, key: str) -> Command:
        """GET; a missing key is reported through the command's error."""
        return self._run("string", "get", key)

    def get_range(self, key: str, start: int, end: int) -> Command:
        return self._run("string", "getrange", key, start, end)

    def get_set(self, key: str, value: Any) -> Command:
        return self._run("string", "getset", key, value)

    def get_ex(self, key: str, expiration: Duration) -> Command:
        """GETEX; a zero expiration removes the key's TTL."""
        args: list[Any] = ["getex", key]
        nanos = _nanoseconds(expiration)
        if nanos > 0:
            args += _expiry_args(expiration)
        elif nanos == 0:
            args.append("persist")
        return self._run("string", *args)

    def get_del(self, key: str) -> Command:
        return self._run("string", "getdel", key)

    def incr(self, key: str) -> Command:
        return self._run("int", "incr", key)

    def incr_by(self, key: str, value: int) -> Command:
        return self._run("int", "incrby", key, value)

    def incr_by_float(self, key: str, value: float) -> Command:
        return self._run("float", "incrbyfloat", key, value)

    def mget(self, *args: str) -> Command:
        return self._run("slice", "mget", *args)

    def mset(self, *args: Any) -> Command:
        """MSET from flat pairs, a single list of pairs, or a mapping."""
        return self._run("status", "mset", *expand_args(args))

    def msetnx(self, *args: Any) -> Command:
        """MSETNX from flat pairs, a single list of pairs, or a mapping."""
        return self._run("bool", "msetnx", *expand_args(args))

    def set(self, key: str, value: Any, expiration: Duration = 0) -> Command:
        """SET; zero means no expiration and KEEP_TTL keeps the existing one."""
        args: list[Any] = ["set", key, value]
        if _nanoseconds(expiration) > 0:
            args += _expiry_args(expiration)
        elif _is_keep_ttl(expiration):
            args.append("keepttl")
        return self._run("status", *args)

    def set_args(self, key: str, value: Any, args: SetArgs | None = None) -> Command:
        """SET with every option given in ``args``."""
        options = args or SetArgs()
        line: list[Any] = ["set", key, value]
        if options.keep_ttl:
            line.append("keepttl")
        if options.expire_at is not None:
            line += ["exat", _unix_micros(options.expire_at) // 1_000_000]
        if _nanoseconds(options.ttl) > 0:
            line += _expiry_args(options.ttl)
        if options.mode:
            line.append(options.mode)
        if options.get:
            line.append("get")
        return self._run("status", *line)

    def set_ex(self, key: str, value: Any, expiration: Duration) -> Command:
        return self._run("status", "setex", key, format_sec(expiration), value)

    def _set_conditional(self, key: str, value: Any, expiration: Duration, mode: str) -> Command:
        if _nanoseconds(expiration) == 0:
            if mode == "nx":
                # The old SETNX keeps older servers working.
                return self._run("bool", "setnx", key, value)
            return self._run("bool", "set", key, value, mode)
        if _is_keep_ttl(expiration):
            return self._run("bool", "set", key, value, "keepttl", mode)
        return self._run("bool", "set", key, value, *_expiry_args(expiration), mode)

    def set_nx(self, key: str, value: Any, expiration: Duration = 0) -> Command:
        """SET ... NX; zero means no expiration and KEEP_TTL keeps the existing one."""
        return self._set_conditional(key, value, expiration, "nx")

    def set_xx(self, key: str, value: Any, expiration: Duration = 0) -> Command:
        """SET ... XX; zero means no expiration and KEEP_TTL keeps the existing one."""
        return self._set_conditional(key, value, expiration, "xx")

    def set_range(self, key: str, offset: int, value: str) -> Command:
        return self._run("int", "setrange", key, offset, value)

    def strlen(self, key: str) -> Command:
        return self._run("int", "strlen", key)