"""Command objects, duration helpers and the base for command builders."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Callable, Union

logger = logging.getLogger(__name__)

Duration = Union[timedelta, int, float]

KEEP_TTL = timedelta(microseconds=-1)
"""Expiration value that asks SET to keep the key's existing TTL."""

_NS_PER_MS = 1_000_000
_NS_PER_SEC = 1_000_000_000

# Commands whose second argument names a subcommand worth reporting.
_SUBCOMMAND_NAMES = frozenset({"cluster", "command"})


def _nanoseconds(duration: Duration) -> int:
    """Convert a timedelta, or a number of seconds, to whole nanoseconds."""
    if isinstance(duration, timedelta):
        whole_seconds = duration.days * 86_400 + duration.seconds
        return whole_seconds * _NS_PER_SEC + duration.microseconds * 1_000
    return int(round(duration * _NS_PER_SEC))


def _truncating_div(value: int, unit: int) -> int:
    quotient = abs(value) // unit
    return quotient if value >= 0 else -quotient


def use_precise(duration: Duration) -> bool:
    """Tell whether a duration needs millisecond precision to be expressed."""
    nanos = _nanoseconds(duration)
    return nanos < _NS_PER_SEC or nanos % _NS_PER_SEC != 0


def format_ms(duration: Duration) -> int:
    """Express a duration in whole milliseconds, rounding tiny positives up to 1."""
    nanos = _nanoseconds(duration)
    if 0 < nanos < _NS_PER_MS:
        logger.warning(
            "specified duration is %s, but minimal supported value is %s - truncating to 1ms",
            duration,
            timedelta(milliseconds=1),
        )
        return 1
    return _truncating_div(nanos, _NS_PER_MS)


def format_sec(duration: Duration) -> int:
    """Express a duration in whole seconds, rounding tiny positives up to 1."""
    nanos = _nanoseconds(duration)
    if 0 < nanos < _NS_PER_SEC:
        logger.warning(
            "specified duration is %s, but minimal supported value is %s - truncating to 1s",
            duration,
            timedelta(seconds=1),
        )
        return 1
    return _truncating_div(nanos, _NS_PER_SEC)


def expand_arg(arg: Any) -> list[Any]:
    """Flatten one argument: sequences are spread, mappings become key/value pairs."""
    if isinstance(arg, (list, tuple)):
        return list(arg)
    if isinstance(arg, dict):
        return [item for pair in arg.items() for item in pair]
    return [arg]


def expand_args(values: Any) -> list[Any]:
    """Flatten variadic arguments; a single argument may itself be a list or mapping."""
    values = list(values)
    if len(values) == 1:
        return expand_arg(values[0])
    return values


@dataclass(eq=False)
class Command:
    """A command to send, together with the reply or error it produced."""

    args: list[Any]
    reply: str = "cmd"
    val: Any = None
    err: BaseException | None = None
    read_timeout: Duration | None = None
    first_key_pos: int = 0
    precision: Duration | None = None

    def __post_init__(self) -> None:
        self.args = list(self.args)

    def name(self) -> str:
        """The lower-cased command name, or an empty string."""
        if not self.args:
            return ""
        first = self.args[0]
        if isinstance(first, (bytes, bytearray)):
            first = bytes(first).decode("utf-8", errors="replace")
        return str(first).lower()

    def full_name(self) -> str:
        """The command name, followed by its subcommand for multi-part commands."""
        name = self.name()
        if name in _SUBCOMMAND_NAMES and len(self.args) > 1:
            second = self.args[1]
            if isinstance(second, str):
                return f"{name} {second}"
        return name


class Cmdable:
    """Base for command builders that hand each command to a processing callable.

    The callable receives a :class:`Command` and is expected to fill in its
    ``val`` or ``err``; its return value is ignored.
    """

    def __init__(self, process: Callable[[Command], Any]) -> None:
        self._process = process

    def _execute(self, command: Command) -> Command:
        self._process(command)
        return command

    def _run(
        self,
        reply: str,
        *args: Any,
        read_timeout: Duration | None = None,
        first_key_pos: int = 0,
        precision: Duration | None = None,
    ) -> Command:
        command = Command(
            list(args),
            reply=reply,
            read_timeout=read_timeout,
            first_key_pos=first_key_pos,
            precision=precision,
        )
        return self._execute(command)