"""Short, printable renderings of commands for logs and traces."""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any, Iterable

_NUM_ARG_LIMIT = 32
_ARG_LEN_LIMIT = 64
_NUM_CMD_LIMIT = 100
_NUM_NAME_LIMIT = 10


def cmd_string(cmd: Any) -> str:
    """Render one command."""
    return format_cmd(cmd)


def cmds_string(cmds: Iterable[Any]) -> tuple[str, str]:
    """Render a batch: a summary of unique names and one line per command."""
    seen: set[str] = set()
    names: list[str] = []
    lines: list[str] = []

    for index, cmd in enumerate(cmds):
        if index > _NUM_CMD_LIMIT:
            break
        lines.append(format_cmd(cmd))
        if len(names) >= _NUM_NAME_LIMIT:
            continue
        name = cmd.full_name()
        if name not in seen:
            seen.add(name)
            names.append(name)

    return " ".join(names), "\n".join(lines)


def format_cmd(cmd: Any) -> str:
    """Render a command's arguments, followed by its error if it has one."""
    text = " ".join(format_arg(arg) for arg in cmd.args[: _NUM_ARG_LIMIT + 1])
    if cmd.err is not None:
        text += ": " + str(cmd.err)
    return text


def format_arg(value: Any) -> str:
    """Render one argument; binary or unprintable text is shown as hex."""
    if value is None:
        return "<nil>"
    if isinstance(value, str):
        return _printable(value.encode("utf-8")[:_ARG_LEN_LIMIT])
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _printable(bytes(value)[:_ARG_LEN_LIMIT])
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, datetime):
        return _format_time(value)
    return str(value)


def _printable(data: bytes) -> str:
    if all(0x21 <= byte <= 0x7E for byte in data):
        return data.decode("ascii")
    return data.hex()


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return format(Decimal(repr(value)).normalize(), "f")


def _format_time(value: datetime) -> str:
    text = value.strftime("%Y-%m-%dT%H:%M:%S")
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")
    offset = value.utcoffset()
    if offset is None:
        return text
    if offset == timedelta(0):
        return text + "Z"
    sign = "+" if offset > timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"