"""Builders for stream commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .command import (
    Cmdable,
    Command,
    Duration,
    _nanoseconds,
    _truncating_div,
    expand_arg,
    format_ms,
)

_NS_PER_MS = 1_000_000


def _whole_ms(duration: Duration) -> int:
    return _truncating_div(_nanoseconds(duration), _NS_PER_MS)


@dataclass
class XAddArgs:
    """Options of XADD.

    ``values`` may be a flat list of fields and values or a mapping.
    """

    stream: str = ""
    max_len: int = 0
    max_len_approx: int = 0
    id: str = ""
    values: Any = field(default_factory=list)


@dataclass
class XReadArgs:
    """Options of XREAD; ``streams`` lists the stream names, then their ids.

    A negative ``block`` leaves BLOCK out; zero blocks without limit.
    """

    streams: list[str] = field(default_factory=list)
    count: int = 0
    block: Duration = 0


@dataclass
class XReadGroupArgs:
    """Options of XREADGROUP; ``streams`` lists the stream names, then their ids."""

    group: str = ""
    consumer: str = ""
    streams: list[str] = field(default_factory=list)
    count: int = 0
    block: Duration = 0
    no_ack: bool = False


@dataclass
class XPendingExtArgs:
    """Options of the extended form of XPENDING."""

    stream: str = ""
    group: str = ""
    idle: Duration = 0
    start: str = ""
    end: str = ""
    count: int = 0
    consumer: str = ""


@dataclass
class XClaimArgs:
    """Options of XCLAIM."""

    stream: str = ""
    group: str = ""
    consumer: str = ""
    min_idle: Duration = 0
    messages: list[str] = field(default_factory=list)

    def to_args(self) -> list[Any]:
        """The XCLAIM command line."""
        return [
            "xclaim",
            self.stream,
            self.group,
            self.consumer,
            _whole_ms(self.min_idle),
            *self.messages,
        ]


class StreamCommands(Cmdable):
    """Stream commands."""

    def xadd(self, args: XAddArgs) -> Command:
        line: list[Any] = ["xadd", args.stream]
        if args.max_len > 0:
            line += ["maxlen", args.max_len]
        elif args.max_len_approx > 0:
            line += ["maxlen", "~", args.max_len_approx]
        line.append(args.id or "*")
        line += expand_arg(args.values)
        return self._run("string", *line)

    def xdel(self, stream: str, *args: str) -> Command:
        return self._run("int", "xdel", stream, *args)

    def xlen(self, stream: str) -> Command:
        return self._run("int", "xlen", stream)

    def xrange(self, stream: str, start: str, stop: str) -> Command:
        return self._run("x_message_slice", "xrange", stream, start, stop)

    def xrange_n(self, stream: str, start: str, stop: str, count: int) -> Command:
        return self._run("x_message_slice", "xrange", stream, start, stop, "count", count)

    def xrevrange(self, stream: str, start: str, stop: str) -> Command:
        return self._run("x_message_slice", "xrevrange", stream, start, stop)

    def xrevrange_n(self, stream: str, start: str, stop: str, count: int) -> Command:
        return self._run("x_message_slice", "xrevrange", stream, start, stop, "count", count)

    def xread(self, args: XReadArgs) -> Command:
        line: list[Any] = ["xread"]
        key_pos = 1
        if args.count > 0:
            line += ["count", args.count]
            key_pos += 2
        blocking = _nanoseconds(args.block) >= 0
        if blocking:
            line += ["block", _whole_ms(args.block)]
            key_pos += 2
        line.append("streams")
        key_pos += 1
        line += args.streams
        return self._run(
            "x_stream_slice",
            *line,
            read_timeout=args.block if blocking else None,
            first_key_pos=key_pos,
        )

    def xread_streams(self, *args: str) -> Command:
        """XREAD without BLOCK for the given streams and ids."""
        return self.xread(XReadArgs(streams=list(args), block=-1))

    def xgroup_create(self, stream: str, group: str, start: str) -> Command:
        return self._run("status", "xgroup", "create", stream, group, start)

    def xgroup_create_mkstream(self, stream: str, group: str, start: str) -> Command:
        return self._run("status", "xgroup", "create", stream, group, start, "mkstream")

    def xgroup_set_id(self, stream: str, group: str, start: str) -> Command:
        return self._run("status", "xgroup", "setid", stream, group, start)

    def xgroup_destroy(self, stream: str, group: str) -> Command:
        return self._run("int", "xgroup", "destroy", stream, group)

    def xgroup_del_consumer(self, stream: str, group: str, consumer: str) -> Command:
        return self._run("int", "xgroup", "delconsumer", stream, group, consumer)

    def xreadgroup(self, args: XReadGroupArgs) -> Command:
        line: list[Any] = ["xreadgroup", "group", args.group, args.consumer]
        key_pos = 1
        if args.count > 0:
            line += ["count", args.count]
            key_pos += 2
        blocking = _nanoseconds(args.block) >= 0
        if blocking:
            line += ["block", _whole_ms(args.block)]
            key_pos += 2
        if args.no_ack:
            line.append("noack")
            key_pos += 1
        line.append("streams")
        key_pos += 1
        line += args.streams
        return self._run(
            "x_stream_slice",
            *line,
            read_timeout=args.block if blocking else None,
            first_key_pos=key_pos,
        )

    def xack(self, stream: str, group: str, *args: str) -> Command:
        return self._run("int", "xack", stream, group, *args)

    def xpending(self, stream: str, group: str) -> Command:
        return self._run("x_pending", "xpending", stream, group)

    def xpending_ext(self, args: XPendingExtArgs) -> Command:
        line: list[Any] = ["xpending", args.stream, args.group]
        if _nanoseconds(args.idle) != 0:
            line += ["idle", format_ms(args.idle)]
        line += [args.start, args.end, args.count]
        if args.consumer:
            line.append(args.consumer)
        return self._run("x_pending_ext", *line)

    def xclaim(self, args: XClaimArgs) -> Command:
        return self._run("x_message_slice", *args.to_args())

    def xclaim_just_id(self, args: XClaimArgs) -> Command:
        return self._run("string_slice", *args.to_args(), "justid")

    def xtrim(self, key: str, max_len: int) -> Command:
        return self._run("int", "xtrim", key, "maxlen", max_len)

    def xtrim_approx(self, key: str, max_len: int) -> Command:
        return self._run("int", "xtrim", key, "maxlen", "~", max_len)

    def xinfo_stream_full(self, key: str, count: int = 0) -> Command:
        """XINFO STREAM key FULL [COUNT count]."""
        line: list[Any] = ["xinfo", "stream", key, "full"]
        if count > 0:
            line += ["count", count]
        return self._run("xinfo_stream_full", *line)