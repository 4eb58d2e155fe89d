"""Builders for hash and list commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .command import Cmdable, Command, Duration, expand_args, format_sec


@dataclass
class LPosArgs:
    """Options of LPOS; zero values are left out."""

    rank: int = 0
    max_len: int = 0

    def _options(self) -> list[Any]:
        options: list[Any] = []
        if self.rank:
            options += ["rank", self.rank]
        if self.max_len:
            options += ["maxlen", self.max_len]
        return options


class HashCommands(Cmdable):
    """Hash commands."""

    def hdel(self, key: str, *args: str) -> Command:
        return self._run("int", "hdel", key, *args)

    def hexists(self, key: str, field: str) -> Command:
        return self._run("bool", "hexists", key, field)

    def hget(self, key: str, field: str) -> Command:
        return self._run("string", "hget", key, field)

    def hgetall(self, key: str) -> Command:
        return self._run("string_string_map", "hgetall", key)

    def hincr_by(self, key: str, field: str, incr: int) -> Command:
        return self._run("int", "hincrby", key, field, incr)

    def hincr_by_float(self, key: str, field: str, incr: float) -> Command:
        return self._run("float", "hincrbyfloat", key, field, incr)

    def hkeys(self, key: str) -> Command:
        return self._run("string_slice", "hkeys", key)

    def hlen(self, key: str) -> Command:
        return self._run("int", "hlen", key)

    def hmget(self, key: str, *args: str) -> Command:
        """Values of the given fields; missing fields come back as None."""
        return self._run("slice", "hmget", key, *args)

    def hset(self, key: str, *args: Any) -> Command:
        """HSET from flat pairs, a single list of pairs, or a mapping."""
        return self._run("int", "hset", key, *expand_args(args))

    def hmset(self, key: str, *args: Any) -> Command:
        """The older HMSET, taking the same argument forms as :meth:`hset`."""
        return self._run("bool", "hmset", key, *expand_args(args))

    def hsetnx(self, key: str, field: str, value: Any) -> Command:
        return self._run("bool", "hsetnx", key, field, value)

    def hvals(self, key: str) -> Command:
        return self._run("string_slice", "hvals", key)

    def hrand_field(self, key: str, count: int, with_values: bool = False) -> Command:
        args: list[Any] = ["hrandfield", key, count]
        if with_values:
            args.append("withvalues")
        return self._run("string_slice", *args)


class ListCommands(Cmdable):
    """List commands."""

    def _blocking_pop(self, name: str, timeout: Duration, keys: tuple[str, ...]) -> Command:
        return self._run(
            "string_slice", name, *keys, format_sec(timeout), read_timeout=timeout
        )

    def blpop(self, timeout: Duration, *args: str) -> Command:
        return self._blocking_pop("blpop", timeout, args)

    def brpop(self, timeout: Duration, *args: str) -> Command:
        return self._blocking_pop("brpop", timeout, args)

    def brpoplpush(self, source: str, destination: str, timeout: Duration) -> Command:
        return self._run(
            "string",
            "brpoplpush",
            source,
            destination,
            format_sec(timeout),
            read_timeout=timeout,
        )

    def lindex(self, key: str, index: int) -> Command:
        return self._run("string", "lindex", key, index)

    def linsert(self, key: str, op: str, pivot: Any, value: Any) -> Command:
        return self._run("int", "linsert", key, op, pivot, value)

    def linsert_before(self, key: str, pivot: Any, value: Any) -> Command:
        return self.linsert(key, "before", pivot, value)

    def linsert_after(self, key: str, pivot: Any, value: Any) -> Command:
        return self.linsert(key, "after", pivot, value)

    def llen(self, key: str) -> Command:
        return self._run("int", "llen", key)

    def lpop(self, key: str) -> Command:
        return self._run("string", "lpop", key)

    def lpop_count(self, key: str, count: int) -> Command:
        return self._run("string_slice", "lpop", key, count)

    def lpos(self, key: str, value: str, args: LPosArgs | None = None) -> Command:
        options = (args or LPosArgs())._options()
        return self._run("int", "lpos", key, value, *options)

    def lpos_count(self, key: str, value: str, count: int, args: LPosArgs | None = None) -> Command:
        options = (args or LPosArgs())._options()
        return self._run("int_slice", "lpos", key, value, "count", count, *options)

    def lpush(self, key: str, *args: Any) -> Command:
        return self._run("int", "lpush", key, *expand_args(args))

    def lpushx(self, key: str, *args: Any) -> Command:
        return self._run("int", "lpushx", key, *expand_args(args))

    def lrange(self, key: str, start: int, stop: int) -> Command:
        return self._run("string_slice", "lrange", key, start, stop)

    def lrem(self, key: str, count: int, value: Any) -> Command:
        return self._run("int", "lrem", key, count, value)

    def lset(self, key: str, index: int, value: Any) -> Command:
        return self._run("status", "lset", key, index, value)

    def ltrim(self, key: str, start: int, stop: int) -> Command:
        return self._run("status", "ltrim", key, start, stop)

    def rpop(self, key: str) -> Command:
        return self._run("string", "rpop", key)

    def rpoplpush(self, source: str, destination: str) -> Command:
        return self._run("string", "rpoplpush", source, destination)

    def rpush(self, key: str, *args: Any) -> Command:
        return self._run("int", "rpush", key, *expand_args(args))

    def rpushx(self, key: str, *args: Any) -> Command:
        return self._run("int", "rpushx", key, *expand_args(args))

    def lmove(self, source: str, destination: str, srcpos: str, destpos: str) -> Command:
        return self._run("string", "lmove", source, destination, srcpos, destpos)