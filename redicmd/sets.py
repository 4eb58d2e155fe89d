"""Builders for set commands."""

from __future__ import annotations

from typing import Any

from .command import Cmdable, Command, expand_args


class SetCommands(Cmdable):
    """Set commands."""

    def sadd(self, key: str, *args: Any) -> Command:
        """SADD from members given one by one, as a list, or as a mapping."""
        return self._run("int", "sadd", key, *expand_args(args))

    def scard(self, key: str) -> Command:
        return self._run("int", "scard", key)

    def sdiff(self, *args: str) -> Command:
        return self._run("string_slice", "sdiff", *args)

    def sdiff_store(self, destination: str, *args: str) -> Command:
        return self._run("int", "sdiffstore", destination, *args)

    def sinter(self, *args: str) -> Command:
        return self._run("string_slice", "sinter", *args)

    def sinter_store(self, destination: str, *args: str) -> Command:
        return self._run("int", "sinterstore", destination, *args)

    def sismember(self, key: str, member: Any) -> Command:
        return self._run("bool", "sismember", key, member)

    def smismember(self, key: str, *args: Any) -> Command:
        """SMISMEMBER key member [member ...]."""
        return self._run("bool_slice", "smismember", key, *expand_args(args))

    def smembers(self, key: str) -> Command:
        """SMEMBERS with the reply read as a list."""
        return self._run("string_slice", "smembers", key)

    def smembers_map(self, key: str) -> Command:
        """SMEMBERS with the reply read as a mapping of members."""
        return self._run("string_struct_map", "smembers", key)

    def smove(self, source: str, destination: str, member: Any) -> Command:
        return self._run("bool", "smove", source, destination, member)

    def spop(self, key: str) -> Command:
        return self._run("string", "spop", key)

    def spop_n(self, key: str, count: int) -> Command:
        return self._run("string_slice", "spop", key, count)

    def srand_member(self, key: str) -> Command:
        return self._run("string", "srandmember", key)

    def srand_member_n(self, key: str, count: int) -> Command:
        return self._run("string_slice", "srandmember", key, count)

    def srem(self, key: str, *args: Any) -> Command:
        return self._run("int", "srem", key, *expand_args(args))

    def sunion(self, *args: str) -> Command:
        return self._run("string_slice", "sunion", *args)

    def sunion_store(self, destination: str, *args: str) -> Command:
        return self._run("int", "sunionstore", destination, *args)