"""Builders for sorted set and HyperLogLog commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .command import Cmdable, Command, Duration, expand_args, format_sec


@dataclass
class Z:
    """A sorted set member with its score."""

    score: float = 0.0
    member: Any = None


@dataclass
class ZWithKey(Z):
    """A sorted set member together with the key it was popped from."""

    key: str = ""


@dataclass
class ZStore:
    """Inputs of ZINTERSTORE and ZUNIONSTORE.

    ``aggregate`` may be ``"sum"``, ``"min"``, ``"max"`` or empty.
    """

    keys: list[str] = field(default_factory=list)
    weights: list[float] = field(default_factory=list)
    aggregate: str = ""

    def _args(self, name: str, destination: str) -> list[Any]:
        line: list[Any] = [name, destination, len(self.keys), *self.keys]
        if self.weights:
            line += ["weights", *self.weights]
        if self.aggregate:
            line += ["aggregate", self.aggregate]
        return line


@dataclass
class ZRangeBy:
    """Bounds and paging of the range-by-score and range-by-lex commands."""

    min: str = ""
    max: str = ""
    offset: int = 0
    count: int = 0

    def _limit(self) -> list[Any]:
        if self.offset or self.count:
            return ["limit", self.offset, self.count]
        return []


def _pairs(members: tuple[Z, ...]) -> list[Any]:
    return [item for z in members for item in (z.score, z.member)]


def _single_count(name: str, key: str, counts: tuple[int, ...]) -> list[Any]:
    if len(counts) > 1:
        raise ValueError("too many arguments")
    return [name, key, *counts]


class SortedSetCommands(Cmdable):
    """Sorted set commands."""

    def _blocking_pop(self, name: str, timeout: Duration, keys: tuple[str, ...]) -> Command:
        return self._run(
            "z_with_key", name, *keys, format_sec(timeout), read_timeout=timeout
        )

    def bzpopmax(self, timeout: Duration, *args: str) -> Command:
        """BZPOPMAX key [key ...] timeout."""
        return self._blocking_pop("bzpopmax", timeout, args)

    def bzpopmin(self, timeout: Duration, *args: str) -> Command:
        """BZPOPMIN key [key ...] timeout."""
        return self._blocking_pop("bzpopmin", timeout, args)

    def _zadd(self, key: str, flags: list[str], members: tuple[Z, ...]) -> Command:
        return self._run("int", "zadd", key, *flags, *_pairs(members))

    def zadd(self, key: str, *args: Z) -> Command:
        return self._zadd(key, [], args)

    def zadd_nx(self, key: str, *args: Z) -> Command:
        return self._zadd(key, ["nx"], args)

    def zadd_xx(self, key: str, *args: Z) -> Command:
        return self._zadd(key, ["xx"], args)

    def zadd_ch(self, key: str, *args: Z) -> Command:
        return self._zadd(key, ["ch"], args)

    def zadd_nx_ch(self, key: str, *args: Z) -> Command:
        return self._zadd(key, ["nx", "ch"], args)

    def zadd_xx_ch(self, key: str, *args: Z) -> Command:
        return self._zadd(key, ["xx", "ch"], args)

    def _zincr(self, key: str, flags: list[str], member: Z) -> Command:
        return self._run("float", "zadd", key, *flags, member.score, member.member)

    def zincr(self, key: str, member: Z) -> Command:
        """ZADD key INCR score member."""
        return self._zincr(key, ["incr"], member)

    def zincr_nx(self, key: str, member: Z) -> Command:
        return self._zincr(key, ["incr", "nx"], member)

    def zincr_xx(self, key: str, member: Z) -> Command:
        return self._zincr(key, ["incr", "xx"], member)

    def zcard(self, key: str) -> Command:
        return self._run("int", "zcard", key)

    def zcount(self, key: str, min_score: str, max_score: str) -> Command:
        return self._run("int", "zcount", key, min_score, max_score)

    def zlexcount(self, key: str, min_lex: str, max_lex: str) -> Command:
        return self._run("int", "zlexcount", key, min_lex, max_lex)

    def zincr_by(self, key: str, increment: float, member: str) -> Command:
        return self._run("float", "zincrby", key, increment, member)

    def zinter_store(self, destination: str, store: ZStore) -> Command:
        return self._run("int", *store._args("zinterstore", destination), first_key_pos=3)

    def zmscore(self, key: str, *args: str) -> Command:
        return self._run("float_slice", "zmscore", key, *args)

    def zpopmax(self, key: str, *args: int) -> Command:
        """ZPOPMAX with an optional count."""
        return self._run("z_slice", *_single_count("zpopmax", key, args))

    def zpopmin(self, key: str, *args: int) -> Command:
        """ZPOPMIN with an optional count."""
        return self._run("z_slice", *_single_count("zpopmin", key, args))

    def zrange(self, key: str, start: int, stop: int) -> Command:
        return self._run("string_slice", "zrange", key, start, stop)

    def zrange_with_scores(self, key: str, start: int, stop: int) -> Command:
        return self._run("z_slice", "zrange", key, start, stop, "withscores")

    def zrange_by_score(self, key: str, opt: ZRangeBy) -> Command:
        return self._run("string_slice", "zrangebyscore", key, opt.min, opt.max, *opt._limit())

    def zrange_by_lex(self, key: str, opt: ZRangeBy) -> Command:
        return self._run("string_slice", "zrangebylex", key, opt.min, opt.max, *opt._limit())

    def zrange_by_score_with_scores(self, key: str, opt: ZRangeBy) -> Command:
        return self._run(
            "z_slice", "zrangebyscore", key, opt.min, opt.max, "withscores", *opt._limit()
        )

    def zrank(self, key: str, member: str) -> Command:
        return self._run("int", "zrank", key, member)

    def zrem(self, key: str, *args: Any) -> Command:
        """ZREM from members given one by one or as a list."""
        return self._run("int", "zrem", key, *expand_args(args))

    def zrem_range_by_rank(self, key: str, start: int, stop: int) -> Command:
        return self._run("int", "zremrangebyrank", key, start, stop)

    def zrem_range_by_score(self, key: str, min_score: str, max_score: str) -> Command:
        return self._run("int", "zremrangebyscore", key, min_score, max_score)

    def zrem_range_by_lex(self, key: str, min_lex: str, max_lex: str) -> Command:
        return self._run("int", "zremrangebylex", key, min_lex, max_lex)

    def zrevrange(self, key: str, start: int, stop: int) -> Command:
        return self._run("string_slice", "zrevrange", key, start, stop)

    def zrevrange_with_scores(self, key: str, start: int, stop: int) -> Command:
        return self._run("z_slice", "zrevrange", key, start, stop, "withscores")

    def zrevrange_by_score(self, key: str, opt: ZRangeBy) -> Command:
        return self._run(
            "string_slice", "zrevrangebyscore", key, opt.max, opt.min, *opt._limit()
        )

    def zrevrange_by_lex(self, key: str, opt: ZRangeBy) -> Command:
        return self._run("string_slice", "zrevrangebylex", key, opt.max, opt.min, *opt._limit())

    def zrevrange_by_score_with_scores(self, key: str, opt: ZRangeBy) -> Command:
        return self._run(
            "z_slice", "zrevrangebyscore", key, opt.max, opt.min, "withscores", *opt._limit()
        )

    def zrevrank(self, key: str, member: str) -> Command:
        return self._run("int", "zrevrank", key, member)

    def zscore(self, key: str, member: str) -> Command:
        return self._run("float", "zscore", key, member)

    def zunion_store(self, destination: str, store: ZStore) -> Command:
        return self._run("int", *store._args("zunionstore", destination), first_key_pos=3)

    def zrand_member(self, key: str, count: int, with_scores: bool = False) -> Command:
        line: list[Any] = ["zrandmember", key, count]
        if with_scores:
            line.append("withscores")
        return self._run("string_slice", *line)

    def zdiff(self, *args: str) -> Command:
        return self._run("string_slice", "zdiff", len(args), *args)

    def zdiff_with_scores(self, *args: str) -> Command:
        return self._run("z_slice", "zdiff", len(args), *args, "withscores")


class HyperLogLogCommands(Cmdable):
    """HyperLogLog commands."""

    def pfadd(self, key: str, *args: Any) -> Command:
        return self._run("int", "pfadd", key, *expand_args(args))

    def pfcount(self, *args: str) -> Command:
        return self._run("int", "pfcount", *args)

    def pfmerge(self, dest: str, *args: str) -> Command:
        return self._run("status", "pfmerge", dest, *args)