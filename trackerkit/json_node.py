"""In-memory JSON tree: typed nodes with ordered, optionally named children."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Iterator

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class JsonType(IntEnum):
    """The kind of value a node holds."""

    FALSE = 0
    TRUE = 1
    NULL = 2
    NUMBER = 3
    STRING = 4
    ARRAY = 5
    OBJECT = 6


def _to_int(value: float) -> int:
    """Truncate toward zero into the signed 32-bit range."""
    if math.isnan(value):
        return 0
    if value >= _INT_MAX:
        return _INT_MAX
    if value <= _INT_MIN:
        return _INT_MIN
    return int(value)


def _ascii_lower(text: str) -> str:
    return "".join(ch.lower() if ch.isascii() else ch for ch in text)


def _names_match(node_name: str | None, wanted: str) -> bool:
    if node_name is None:
        return False
    return _ascii_lower(node_name) == _ascii_lower(wanted)


@dataclass
class JsonNode:
    """One JSON value; arrays and objects keep their members in ``children``."""

    type: JsonType = JsonType.NULL
    value_string: str | None = None
    value_int: int = 0
    value_double: float = 0.0
    name: str | None = None
    children: list[JsonNode] = field(default_factory=list)
    is_reference: bool = False

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[JsonNode]:
        return iter(list(self.children))

    def _position(self, index: int) -> int | None:
        # A negative index walks no steps, so it lands on the first member.
        position = max(index, 0)
        if position >= len(self.children):
            return None
        return position

    def _position_named(self, name: str) -> int | None:
        for position, child in enumerate(self.children):
            if _names_match(child.name, name):
                return position
        return None

    def item(self, index: int) -> JsonNode | None:
        """Return the member at ``index``, or None when there is none."""
        position = self._position(index)
        return None if position is None else self.children[position]

    def get(self, name: str) -> JsonNode | None:
        """Return the first member whose name matches ``name`` ignoring ASCII case."""
        position = self._position_named(name)
        return None if position is None else self.children[position]

    def append(self, item: JsonNode | None) -> None:
        """Add ``item`` at the end; a None item is ignored."""
        if item is None:
            return
        self.children.append(item)

    def add(self, name: str, item: JsonNode | None) -> None:
        """Name ``item`` and add it at the end; a None item is ignored."""
        if item is None:
            return
        item.name = name
        self.append(item)

    def _reference_to(self, item: JsonNode) -> JsonNode:
        return JsonNode(
            type=item.type,
            value_string=item.value_string,
            value_int=item.value_int,
            value_double=item.value_double,
            name=None,
            children=item.children,
            is_reference=True,
        )

    def append_reference(self, item: JsonNode) -> None:
        """Append a node sharing ``item``'s value and members without copying them."""
        self.append(self._reference_to(item))

    def add_reference(self, name: str, item: JsonNode) -> None:
        """Add a named node sharing ``item``'s value and members."""
        self.add(name, self._reference_to(item))

    def add_null(self, name: str) -> JsonNode:
        node = create_null()
        self.add(name, node)
        return node

    def add_bool(self, name: str, value: object) -> JsonNode:
        node = create_bool(value)
        self.add(name, node)
        return node

    def add_number(self, name: str, value: float) -> JsonNode:
        node = create_number(value)
        self.add(name, node)
        return node

    def add_string(self, name: str, value: str) -> JsonNode:
        node = create_string(value)
        self.add(name, node)
        return node

    def detach(self, index: int) -> JsonNode | None:
        """Remove and return the member at ``index``, or None when there is none."""
        position = self._position(index)
        if position is None:
            return None
        return self.children.pop(position)

    def detach_named(self, name: str) -> JsonNode | None:
        """Remove and return the member named ``name``, or None when absent."""
        position = self._position_named(name)
        if position is None:
            return None
        return self.children.pop(position)

    def delete(self, index: int) -> None:
        """Remove the member at ``index`` if there is one."""
        self.detach(index)

    def delete_named(self, name: str) -> None:
        """Remove the member named ``name`` if there is one."""
        self.detach_named(name)

    def insert(self, index: int, item: JsonNode) -> None:
        """Insert ``item`` before position ``index``; past the end it is appended."""
        position = self._position(index)
        if position is None:
            self.append(item)
        else:
            self.children.insert(position, item)

    def replace(self, index: int, item: JsonNode) -> None:
        """Put ``item`` in place of the member at ``index``; out of range does nothing."""
        position = self._position(index)
        if position is not None:
            self.children[position] = item

    def replace_named(self, name: str, item: JsonNode) -> None:
        """Put ``item``, named ``name``, in place of the member so named, if any."""
        position = self._position_named(name)
        if position is not None:
            item.name = name
            self.children[position] = item

    def set_number(self, value: float) -> None:
        """Set both numeric views of this node to ``value``."""
        self.value_double = float(value)
        self.value_int = _to_int(self.value_double)

    def duplicate(self, recurse: bool) -> JsonNode:
        """Return an independent copy; members are copied only when ``recurse``."""
        return JsonNode(
            type=self.type,
            value_string=self.value_string,
            value_int=self.value_int,
            value_double=self.value_double,
            name=self.name,
            children=[child.duplicate(True) for child in self.children] if recurse else [],
            is_reference=False,
        )


def create_null() -> JsonNode:
    return JsonNode(type=JsonType.NULL)


def create_true() -> JsonNode:
    return JsonNode(type=JsonType.TRUE)


def create_false() -> JsonNode:
    return JsonNode(type=JsonType.FALSE)


def create_bool(value: object) -> JsonNode:
    return JsonNode(type=JsonType.TRUE if value else JsonType.FALSE)


def create_number(value: float) -> JsonNode:
    node = JsonNode(type=JsonType.NUMBER)
    node.set_number(value)
    return node


def create_string(value: str) -> JsonNode:
    return JsonNode(type=JsonType.STRING, value_string=value)


def create_array() -> JsonNode:
    return JsonNode(type=JsonType.ARRAY)


def create_object() -> JsonNode:
    return JsonNode(type=JsonType.OBJECT)


def create_int_array(numbers: Iterable[int]) -> JsonNode:
    array = create_array()
    array.children.extend(create_number(number) for number in numbers)
    return array


def create_double_array(numbers: Iterable[float]) -> JsonNode:
    array = create_array()
    array.children.extend(create_number(number) for number in numbers)
    return array


def create_string_array(strings: Iterable[str]) -> JsonNode:
    array = create_array()
    array.children.extend(create_string(text) for text in strings)
    return array