"""Reading and writing JSON text for the in-memory tree of ``json_node``."""

from __future__ import annotations

import math

from .json_node import (
    JsonNode,
    JsonType,
    create_array,
    create_number,
    create_object,
    create_string,
)

_DBL_EPSILON = 2.220446049250313e-16
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_HEX_DIGITS = "0123456789abcdefABCDEF"

_PARSE_ESCAPES = {
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_RENDER_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


class JsonParseError(ValueError):
    """Raised when JSON text cannot be parsed; ``position`` marks the offending spot."""

    def __init__(self, position: int, text: str) -> None:
        self.position = position
        self.text = text
        excerpt = text[position:position + 20]
        super().__init__(f"unexpected input at position {position}: {excerpt!r}")


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text

    def at(self, index: int) -> str:
        return self.text[index] if index < len(self.text) else "\0"

    def skip(self, index: int) -> int:
        while True:
            ch = self.at(index)
            if ch == "\0" or ord(ch) > 32:
                return index
            index += 1

    def fail(self, index: int) -> None:
        raise JsonParseError(index, self.text)

    def is_digit(self, index: int) -> bool:
        return "0" <= self.at(index) <= "9"

    def value(self, index: int) -> tuple[JsonNode, int]:
        text = self.text
        if text.startswith("null", index):
            return JsonNode(type=JsonType.NULL), index + 4
        if text.startswith("false", index):
            return JsonNode(type=JsonType.FALSE), index + 5
        if text.startswith("true", index):
            return JsonNode(type=JsonType.TRUE, value_int=1), index + 4
        ch = self.at(index)
        if ch == '"':
            string, index = self.string(index)
            return create_string(string), index
        if ch == "-" or "0" <= ch <= "9":
            return self.number(index)
        if ch == "[":
            return self.array(index)
        if ch == "{":
            return self.object(index)
        self.fail(index)
        raise AssertionError("unreachable")

    def number(self, index: int) -> tuple[JsonNode, int]:
        sign = 1.0
        mantissa = 0.0
        scale = 0
        subscale = 0
        sign_subscale = 1
        if self.at(index) == "-":
            sign = -1.0
            index += 1
        if self.at(index) == "0":
            index += 1
        if "1" <= self.at(index) <= "9":
            while self.is_digit(index):
                mantissa = mantissa * 10.0 + (ord(self.at(index)) - 48)
                index += 1
        if self.at(index) == "." and self.is_digit(index + 1):
            index += 1
            while self.is_digit(index):
                mantissa = mantissa * 10.0 + (ord(self.at(index)) - 48)
                scale -= 1
                index += 1
        if self.at(index) in ("e", "E"):
            index += 1
            if self.at(index) == "+":
                index += 1
            elif self.at(index) == "-":
                sign_subscale = -1
                index += 1
            while self.is_digit(index):
                subscale = subscale * 10 + (ord(self.at(index)) - 48)
                index += 1
        try:
            power = 10.0 ** (scale + subscale * sign_subscale)
        except OverflowError:
            power = math.inf
        return create_number(sign * mantissa * power), index

    def hex4(self, index: int) -> int:
        value = 0
        for offset in range(4):
            ch = self.at(index + offset)
            if ch not in _HEX_DIGITS or ch == "\0":
                return 0
            value = value * 16 + int(ch, 16)
        return value

    def string(self, index: int) -> tuple[str, int]:
        if self.at(index) != '"':
            self.fail(index)
        index += 1
        out: list[str] = []
        while True:
            ch = self.at(index)
            if ch in ('"', "\0"):
                break
            if ch != "\\":
                out.append(ch)
                index += 1
                continue
            index += 1
            escape = self.at(index)
            if escape == "\0":
                break
            if escape in _PARSE_ESCAPES:
                out.append(_PARSE_ESCAPES[escape])
            elif escape == "u":
                code = self.hex4(index + 1)
                index += 4
                if not (0xDC00 <= code <= 0xDFFF or code == 0):
                    if 0xD800 <= code <= 0xDBFF:
                        if self.at(index + 1) == "\\" and self.at(index + 2) == "u":
                            low = self.hex4(index + 3)
                            index += 6
                            if 0xDC00 <= low <= 0xDFFF:
                                out.append(chr(0x10000 + (((code & 0x3FF) << 10) | (low & 0x3FF))))
                    else:
                        out.append(chr(code))
            else:
                out.append(escape)
            index += 1
        if self.at(index) == '"':
            index += 1
        return "".join(out), index

    def array(self, index: int) -> tuple[JsonNode, int]:
        node = create_array()
        index = self.skip(index + 1)
        if self.at(index) == "]":
            return node, index + 1
        child, index = self.value(self.skip(index))
        node.children.append(child)
        index = self.skip(index)
        while self.at(index) == ",":
            child, index = self.value(self.skip(index + 1))
            node.children.append(child)
            index = self.skip(index)
        if self.at(index) == "]":
            return node, index + 1
        self.fail(index)
        raise AssertionError("unreachable")

    def member(self, index: int) -> tuple[JsonNode, int]:
        name, index = self.string(self.skip(index))
        index = self.skip(index)
        if self.at(index) != ":":
            self.fail(index)
        child, index = self.value(self.skip(index + 1))
        child.name = name
        return child, self.skip(index)

    def object(self, index: int) -> tuple[JsonNode, int]:
        node = create_object()
        index = self.skip(index + 1)
        if self.at(index) == "}":
            return node, index + 1
        child, index = self.member(index)
        node.children.append(child)
        while self.at(index) == ",":
            child, index = self.member(index + 1)
            node.children.append(child)
        if self.at(index) == "}":
            return node, index + 1
        self.fail(index)
        raise AssertionError("unreachable")


def _as_text(text: str | bytes) -> str:
    return text.decode("utf-8") if isinstance(text, (bytes, bytearray)) else text


def parse_with_opts(text: str | bytes, require_null_terminated: bool = False) -> tuple[JsonNode, int]:
    """Parse ``text`` and return the tree with the position where parsing stopped.

    With ``require_null_terminated`` anything but whitespace after the value is an error.
    """
    text = _as_text(text)
    parser = _Parser(text)
    node, end = parser.value(parser.skip(0))
    if require_null_terminated:
        end = parser.skip(end)
        if parser.at(end) != "\0":
            parser.fail(end)
    return node, end


def parse(text: str | bytes) -> JsonNode:
    """Parse JSON ``text`` into a tree; trailing input is ignored."""
    return parse_with_opts(text, False)[0]


def format_number(node: JsonNode) -> str:
    """Render the numeric value of ``node`` as JSON text."""
    value = node.value_double
    if value == 0:
        return "0"
    if (
        abs(node.value_int - value) <= _DBL_EPSILON
        and _INT_MIN <= value <= _INT_MAX
    ):
        return "%d" % node.value_int
    if math.isfinite(value) and abs(math.floor(value) - value) <= _DBL_EPSILON and abs(value) < 1.0e60:
        return "%.0f" % value
    if abs(value) < 1.0e-6 or abs(value) > 1.0e9:
        return "%e" % value
    return "%f" % value


def _quote(text: str | None) -> str:
    if text is None:
        return '""'
    parts = ['"']
    for ch in text:
        if ch in _RENDER_ESCAPES:
            parts.append(_RENDER_ESCAPES[ch])
        elif ord(ch) < 32:
            parts.append("\\u%04x" % ord(ch))
        else:
            parts.append(ch)
    parts.append('"')
    return "".join(parts)


def _render_array(node: JsonNode, depth: int, formatted: bool) -> str:
    if not node.children:
        return "[]"
    separator = ", " if formatted else ","
    return "[" + separator.join(_render(child, depth + 1, formatted) for child in node.children) + "]"


def _render_object(node: JsonNode, depth: int, formatted: bool) -> str:
    if not node.children:
        if formatted:
            return "{\n" + "\t" * max(depth - 1, 0) + "}"
        return "{}"
    depth += 1
    parts = ["{"]
    if formatted:
        parts.append("\n")
    last = len(node.children) - 1
    for position, child in enumerate(node.children):
        if formatted:
            parts.append("\t" * depth)
        parts.append(_quote(child.name))
        parts.append(":\t" if formatted else ":")
        parts.append(_render(child, depth, formatted))
        if position != last:
            parts.append(",")
        if formatted:
            parts.append("\n")
    if formatted:
        parts.append("\t" * (depth - 1))
    parts.append("}")
    return "".join(parts)


def _render(node: JsonNode, depth: int, formatted: bool) -> str:
    kind = node.type
    if kind is JsonType.NULL:
        return "null"
    if kind is JsonType.FALSE:
        return "false"
    if kind is JsonType.TRUE:
        return "true"
    if kind is JsonType.NUMBER:
        return format_number(node)
    if kind is JsonType.STRING:
        return _quote(node.value_string)
    if kind is JsonType.ARRAY:
        return _render_array(node, depth, formatted)
    return _render_object(node, depth, formatted)


def render(node: JsonNode, formatted: bool = True) -> str:
    """Render ``node`` as JSON text, indented with tabs when ``formatted``."""
    return _render(node, 0, formatted)


def minify(text: str) -> str:
    """Strip whitespace and ``//`` / ``/* */`` comments outside string literals."""
    text = text.split("\0", 1)[0]
    out: list[str] = []
    index = 0
    length = len(text)
    while index < length:
        ch = text[index]
        if ch in " \t\r\n":
            index += 1
        elif text.startswith("//", index):
            newline = text.find("\n", index)
            index = length if newline < 0 else newline
        elif text.startswith("/*", index):
            end = text.find("*/", index)
            index = length if end < 0 else end + 2
        elif ch == '"':
            out.append(ch)
            index += 1
            while index < length and text[index] != '"':
                if text[index] == "\\":
                    out.append(text[index])
                    index += 1
                    if index >= length:
                        break
                out.append(text[index])
                index += 1
            if index < length:
                out.append(text[index])
                index += 1
        else:
            out.append(ch)
            index += 1
    return "".join(out)