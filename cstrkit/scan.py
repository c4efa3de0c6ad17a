"""Formatted input scanning in the style of C's ``sscanf``."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

_SPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_OCTAL = frozenset("01234567")
_HEX = frozenset("0123456789abcdefABCDEF")
_SIGNS = frozenset("+-")
_EXP = frozenset("eE")
_HEX_MARK = frozenset("xX")
_LENGTHS = frozenset("hlL")

_SIGNED_MAX = {"h": 2**15 - 1, "l": 2**63 - 1}
_INT_MAX = 2**31 - 1
_ULONG_MAX = 2**64 - 1


@dataclass(frozen=True)
class ScanSpec:
    """One conversion's modifiers: ``*`` suppression, field width and length."""

    suppress: bool = False
    width: int = 0
    length: str = ""

    @property
    def signed_bits(self) -> int:
        return {"h": 16, "l": 64}.get(self.length, 32)


Outcome = Optional[Tuple[object, int]]


def _at(text: str, pos: int) -> str:
    return text[pos] if pos < len(text) else ""


def _skip_space(text: str, pos: int) -> int:
    while _at(text, pos) in _SPACE:
        pos += 1
    return pos


def _room(width: int, read: int) -> bool:
    return not width or read < width


def _wrap_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    return value - (1 << bits) if value >> (bits - 1) else value


def _wrap_unsigned(value: int, length: str) -> int:
    if length == "h":
        return value & 0xFFFF
    if length == "l":
        return value & _ULONG_MAX
    return value & 0xFFFFFFFF


def _to_float32(number: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError:
        return math.copysign(math.inf, number)


def _scale(number: float, exponent: int) -> float:
    if exponent > 0:
        for _ in range(exponent):
            if number == 0.0 or math.isinf(number):
                break
            number *= 10.0
    else:
        for _ in range(-exponent):
            if number == 0.0:
                break
            number /= 10.0
    return number


def _hex_digits(text: str, pos: int, width: int) -> Tuple[int, int, int]:
    result = 0
    read = 0
    while _at(text, pos) in _HEX and _room(width, read):
        result = result * 16 + int(text[pos], 16)
        pos += 1
        read += 1
    return result, pos, read


def _scan_d(text: str, pos: int, spec: ScanSpec) -> Outcome:
    if spec.suppress:
        while _at(text, pos) in _DIGITS:
            pos += 1
        return None, pos
    limit = _SIGNED_MAX.get(spec.length, _INT_MAX)
    sign = 1
    max_width = spec.width
    pos = _skip_space(text, pos)
    if _at(text, pos) in _SIGNS:
        if max_width > 0:
            max_width -= 1
        if text[pos] == "-":
            sign = -1
        pos += 1
    if _at(text, pos) not in _DIGITS:
        return None
    value = 0
    count = 0
    while _at(text, pos) in _DIGITS and (max_width == 0 or count < max_width):
        digit = int(text[pos])
        if value > (limit - digit) // 10:
            # Overflow stops the field and keeps what was accumulated so far.
            return value, pos
        value = value * 10 + digit
        pos += 1
        count += 1
    return value * sign, pos


def _scan_c(text: str, pos: int, spec: ScanSpec) -> Outcome:
    count = spec.width or 1
    chunk = text[pos:pos + count]
    return chunk, pos + len(chunk)


def _scan_i(text: str, pos: int, spec: ScanSpec) -> Outcome:
    origin = pos
    width = spec.width
    sign = 1
    count = 0
    pos = _skip_space(text, pos)
    if _at(text, pos) in _SIGNS and _room(width, count):
        if text[pos] == "-":
            sign = -1
        pos += 1
        count += 1
    start_digits = pos
    base = 10
    if _at(text, pos) == "0" and _room(width, count):
        pos += 1
        count += 1
        if _at(text, pos) in _HEX_MARK and _room(width, count):
            pos += 1
            count += 1
            base = 16
        else:
            base = 8
            pos = start_digits + 1
            count = pos - origin
    result = 0
    found = False
    while _at(text, pos) in _HEX and _room(width, count):
        digit = int(text[pos], 16)
        if digit >= base:
            break
        result = result * base + digit
        found = True
        pos += 1
        count += 1
    if not found:
        return None
    if spec.suppress:
        return None, pos
    return _wrap_signed(result * sign, spec.signed_bits), pos


def _scan_float(text: str, pos: int, spec: ScanSpec) -> Outcome:
    pos = _skip_space(text, pos)
    width = spec.width
    read = 0
    sign = 1
    if _at(text, pos) in _SIGNS and _room(width, read):
        if text[pos] == "-":
            sign = -1
        pos += 1
        read += 1
    start_digits = pos
    int_part = 0.0
    while _at(text, pos) in _DIGITS and _room(width, read):
        int_part = int_part * 10 + int(text[pos])
        pos += 1
        read += 1
    frac_part = 0.0
    frac_div = 1.0
    if _at(text, pos) == "." and _room(width, read):
        pos += 1
        read += 1
        while _at(text, pos) in _DIGITS and _room(width, read):
            frac_part = frac_part * 10 + int(text[pos])
            frac_div *= 10.0
            pos += 1
            read += 1
    if pos == start_digits:
        return None
    number = int_part + frac_part / frac_div
    if _at(text, pos) in _EXP and _room(width, read):
        pos += 1
        read += 1
        exp_sign = 1
        if _at(text, pos) in _SIGNS and _room(width, read):
            if text[pos] == "-":
                exp_sign = -1
            pos += 1
            read += 1
        exponent = 0
        while _at(text, pos) in _DIGITS and _room(width, read):
            exponent = exponent * 10 + int(text[pos])
            pos += 1
            read += 1
        number = _scale(number, exp_sign * exponent)
    number *= sign
    if read == 0:
        return None
    if spec.suppress:
        return None, pos
    if spec.length in ("l", "L"):
        return number, pos
    return _to_float32(number), pos


def _scan_u(text: str, pos: int, spec: ScanSpec) -> Outcome:
    pos = _skip_space(text, pos)
    count = 0
    if spec.suppress:
        while _at(text, pos) in _DIGITS and _room(spec.width, count):
            pos += 1
            count += 1
        return None, pos
    number = 0
    while _at(text, pos) in _DIGITS and _room(spec.width, count):
        digit = int(text[pos])
        if number > (_ULONG_MAX - digit) // 10:
            break
        number = number * 10 + digit
        pos += 1
        count += 1
    if count == 0:
        return None
    return _wrap_unsigned(number, spec.length), pos


def _scan_o(text: str, pos: int, spec: ScanSpec) -> Outcome:
    pos = _skip_space(text, pos)
    result = 0
    read = 0
    while _at(text, pos) in _OCTAL and _room(spec.width, read):
        result = (result * 8 + int(text[pos])) & _ULONG_MAX
        pos += 1
        read += 1
    if not read:
        return None
    if spec.suppress:
        return None, pos
    return _wrap_unsigned(result, spec.length), pos


def _scan_x(text: str, pos: int, spec: ScanSpec) -> Outcome:
    pos = _skip_space(text, pos)
    width = spec.width
    if (
        _at(text, pos) == "0"
        and _at(text, pos + 1) in _HEX_MARK
        and (not width or width >= 2)
    ):
        pos += 2
        if width:
            width -= 2
    result, pos, read = _hex_digits(text, pos, width)
    if not read:
        return None
    if spec.suppress:
        return None, pos
    return _wrap_unsigned(result & _ULONG_MAX, spec.length), pos


def _scan_s(text: str, pos: int, spec: ScanSpec) -> Outcome:
    pos = _skip_space(text, pos)
    start = pos
    while pos < len(text) and text[pos] not in _SPACE:
        if spec.width and pos - start >= spec.width:
            break
        pos += 1
    if pos == start:
        return None
    return text[start:pos], pos


def _scan_p(text: str, pos: int, spec: ScanSpec) -> Outcome:
    pos = _skip_space(text, pos)
    if _at(text, pos) != "0" or _at(text, pos + 1) not in _HEX_MARK:
        return None
    result, pos, read = _hex_digits(text, pos + 2, spec.width)
    if not read:
        return None
    if spec.suppress:
        return None, pos
    return result & _ULONG_MAX, pos


_PARSERS: dict[str, Callable[[str, int, ScanSpec], Outcome]] = {
    "d": _scan_d,
    "i": _scan_i,
    "f": _scan_float,
    "e": _scan_float,
    "E": _scan_float,
    "g": _scan_float,
    "G": _scan_float,
    "u": _scan_u,
    "o": _scan_o,
    "x": _scan_x,
    "X": _scan_x,
    "s": _scan_s,
    "c": _scan_c,
    "p": _scan_p,
}


def _read_spec(fmt: str, pos: int) -> Tuple[ScanSpec, int]:
    suppress = False
    if _at(fmt, pos) == "*":
        suppress = True
        pos += 1
    width = 0
    while _at(fmt, pos) in _DIGITS:
        width = width * 10 + int(fmt[pos])
        pos += 1
    length = ""
    if _at(fmt, pos) in _LENGTHS:
        length = fmt[pos]
        pos += 1
    return ScanSpec(suppress, width, length), pos


def sscanf(text: str, fmt: str) -> list:
    """Scan ``text`` according to ``fmt`` and return the converted values.

    Values appear in format order; suppressed conversions are left out and
    ``%n`` contributes the number of characters consumed so far. Scanning
    stops at the first mismatch, returning what was converted until then.
    Raises ``EOFError`` when ``text`` is empty.
    """
    text = text.split("\0", 1)[0]
    fmt = fmt.split("\0", 1)[0]
    if not text:
        raise EOFError("nothing to scan")
    values: list = []
    pos = 0
    fi = 0
    while fi < len(fmt):
        fi = _skip_space(fmt, fi)
        if fmt[fi:fi + 2] != "%c":
            pos = _skip_space(text, pos)
        ch = _at(fmt, fi)
        if ch == "%":
            spec, fi = _read_spec(fmt, fi + 1)
            conv = _at(fmt, fi)
            if conv == "n":
                if not spec.suppress:
                    values.append(pos)
                fi += 1
                continue
            if conv == "%":
                if _at(text, pos) != "%":
                    return values
                fi += 1
                pos += 1
                continue
            parser = _PARSERS.get(conv)
            if parser is None:
                break
            outcome = parser(text, pos, spec)
            if outcome is None:
                return values
            value, pos = outcome
            if not spec.suppress:
                values.append(value)
            fi += 1
        else:
            if not ch or ch != _at(text, pos):
                break
            fi += 1
            pos += 1
    return values