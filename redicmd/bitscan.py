"""Builders for bitmap and cursor-based scan commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .command import Cmdable, Command


@dataclass
class BitCount:
    """Byte range for BITCOUNT."""

    start: int = 0
    end: int = 0


def _scan_options(match: str, count: int) -> list[Any]:
    options: list[Any] = []
    if match:
        options += ["match", match]
    if count > 0:
        options += ["count", count]
    return options


class BitScanCommands(Cmdable):
    """Bitmap commands and the SCAN family."""

    def get_bit(self, key: str, offset: int) -> Command:
        return self._run("int", "getbit", key, offset)

    def set_bit(self, key: str, offset: int, value: int) -> Command:
        return self._run("int", "setbit", key, offset, value)

    def bit_count(self, key: str, bit_count: BitCount | None = None) -> Command:
        args: list[Any] = ["bitcount", key]
        if bit_count is not None:
            args += [bit_count.start, bit_count.end]
        return self._run("int", *args)

    def _bit_op(self, op: str, dest_key: str, *keys: str) -> Command:
        return self._run("int", "bitop", op, dest_key, *keys)

    def bit_op_and(self, dest_key: str, *args: str) -> Command:
        return self._bit_op("and", dest_key, *args)

    def bit_op_or(self, dest_key: str, *args: str) -> Command:
        return self._bit_op("or", dest_key, *args)

    def bit_op_xor(self, dest_key: str, *args: str) -> Command:
        return self._bit_op("xor", dest_key, *args)

    def bit_op_not(self, dest_key: str, key: str) -> Command:
        return self._bit_op("not", dest_key, key)

    def bit_pos(self, key: str, bit: int, *args: int) -> Command:
        """BITPOS with an optional start and end byte."""
        if len(args) > 2:
            raise ValueError("too many arguments")
        return self._run("int", "bitpos", key, bit, *args)

    def bit_field(self, key: str, *args: Any) -> Command:
        return self._run("int_slice", "bitfield", key, *args)

    def scan(self, cursor: int, match: str = "", count: int = 0) -> Command:
        return self._run("scan", "scan", cursor, *_scan_options(match, count))

    def scan_type(self, cursor: int, match: str = "", count: int = 0, key_type: str = "") -> Command:
        args: list[Any] = ["scan", cursor, *_scan_options(match, count)]
        if key_type:
            args += ["type", key_type]
        return self._run("scan", *args)

    def sscan(self, key: str, cursor: int, match: str = "", count: int = 0) -> Command:
        return self._run("scan", "sscan", key, cursor, *_scan_options(match, count))

    def hscan(self, key: str, cursor: int, match: str = "", count: int = 0) -> Command:
        return self._run("scan", "hscan", key, cursor, *_scan_options(match, count))

    def zscan(self, key: str, cursor: int, match: str = "", count: int = 0) -> Command:
        return self._run("scan", "zscan", key, cursor, *_scan_options(match, count))