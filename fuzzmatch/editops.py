"""Edit operations and helpers that apply them to sequences."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class EditType(Enum):
    NONE = "equal"
    REPLACE = "replace"
    INSERT = "insert"
    DELETE = "delete"


@dataclass(frozen=True)
class EditOp:
    """A single edit at one position of the source and destination."""

    type: EditType
    src_pos: int
    dest_pos: int


@dataclass
class Editops:
    """A list of edit operations turning a source into a destination."""

    ops: list = field(default_factory=list)
    src_len: int = 0
    dest_len: int = 0

    def __post_init__(self):
        self.ops = list(self.ops)

    def __len__(self) -> int:
        return len(self.ops)

    def __iter__(self) -> Iterator[EditOp]:
        return iter(self.ops)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Editops(self.ops[index], self.src_len, self.dest_len)
        return self.ops[index]

    def append(self, op: EditOp) -> None:
        self.ops.append(op)


@dataclass(frozen=True)
class Opcode:
    """An edit covering a block of the source and a block of the destination."""

    type: EditType
    src_begin: int
    src_end: int
    dest_begin: int
    dest_end: int


@dataclass
class Opcodes:
    """A list of opcodes turning a source into a destination."""

    ops: list = field(default_factory=list)
    src_len: int = 0
    dest_len: int = 0

    def __post_init__(self):
        self.ops = list(self.ops)

    def __len__(self) -> int:
        return len(self.ops)

    def __iter__(self) -> Iterator[Opcode]:
        return iter(self.ops)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Opcodes(self.ops[index], self.src_len, self.dest_len)
        return self.ops[index]


def editops_apply(ops, s1, s2) -> list:
    """Apply edit operations to ``s1`` and return the resulting elements."""
    source = list(s1)
    dest = list(s2)
    result: list = []
    src_pos = 0

    for op in ops:
        if op.src_pos > src_pos:
            result.extend(source[src_pos : op.src_pos])
            src_pos = op.src_pos

        if op.type in (EditType.NONE, EditType.REPLACE):
            result.append(dest[op.dest_pos])
            src_pos += 1
        elif op.type is EditType.INSERT:
            result.append(dest[op.dest_pos])
        elif op.type is EditType.DELETE:
            src_pos += 1

    result.extend(source[src_pos:])
    return result


def opcodes_apply(ops, s1, s2) -> list:
    """Apply opcodes to ``s1`` and return the resulting elements."""
    source = list(s1)
    dest = list(s2)
    result: list = []
    for op in ops:
        if op.type is EditType.NONE:
            result.extend(source[op.src_begin : op.src_end])
        elif op.type in (EditType.REPLACE, EditType.INSERT):
            result.extend(dest[op.dest_begin : op.dest_end])
    return result


def _to_str(elements) -> str:
    return "".join(ch if isinstance(ch, str) else chr(ch) for ch in elements)


def editops_apply_str(ops, s1, s2) -> str:
    """Apply edit operations to ``s1`` and return the result as a string."""
    return _to_str(editops_apply(ops, s1, s2))


def opcodes_apply_str(ops, s1, s2) -> str:
    """Apply opcodes to ``s1`` and return the result as a string."""
    return _to_str(opcodes_apply(ops, s1, s2))