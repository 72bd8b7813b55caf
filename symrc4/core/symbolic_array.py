"""Symbolic array model for symrc4.

A fixed-size byte array that can be read and written at a symbolic index.
The array is a perfectly balanced binary tree: the index is bit-blasted most
significant bit first and each bit selects a subtree. Reads at a symbolic
index become a chain of ``If`` terms over every leaf; writes rebuild only the
path to the target leaf and share every untouched subtree with the original.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Union

import z3

from symrc4.core.errors import ArrayShapeError
from symrc4.core.types import (
    WIDTH,
    Condition,
    SymbolicByte,
    coerce_byte,
    is_false,
    is_true,
    ite,
)

DEFAULT_SIZE = 1 << WIDTH


@dataclass(frozen=True, eq=False)
class Leaf:
    """A single array element."""

    value: SymbolicByte


@dataclass(frozen=True, eq=False)
class Node:
    """An interior node; ``left`` holds indices whose next bit is 0."""

    left: Tree
    right: Tree


Tree = Union[Leaf, Node]


def build_tree(values: Sequence[SymbolicByte]) -> Tree:
    """Build a balanced tree over ``values`` (length must be a power of two)."""
    if len(values) == 1:
        return Leaf(values[0])
    half = len(values) // 2
    return Node(build_tree(values[:half]), build_tree(values[half:]))


def check_congruent(a: Tree, b: Tree) -> None:
    """Raise ArrayShapeError unless ``a`` and ``b`` have the same shape."""
    if a is b or (isinstance(a, Leaf) and isinstance(b, Leaf)):
        return
    if isinstance(a, Node) and isinstance(b, Node):
        check_congruent(a.left, b.left)
        check_congruent(a.right, b.right)
        return
    raise ArrayShapeError(f"Cannot merge {type(a).__name__} with {type(b).__name__}")


def merge_tree(condition: Condition, then: Tree, otherwise: Tree) -> Tree:
    """Pointwise If(condition, then, otherwise) over two congruent trees."""
    if then is otherwise:
        return then
    if is_true(condition) or is_false(condition):
        # no If terms are built, so the shape is checked up front
        check_congruent(then, otherwise)
        return then if is_true(condition) else otherwise
    if isinstance(then, Leaf) and isinstance(otherwise, Leaf):
        return Leaf(ite(condition, then.value, otherwise.value))
    if isinstance(then, Node) and isinstance(otherwise, Node):
        return Node(
            merge_tree(condition, then.left, otherwise.left),
            merge_tree(condition, then.right, otherwise.right),
        )
    raise ArrayShapeError(
        f"Cannot merge {type(then).__name__} with {type(otherwise).__name__}"
    )


def read_tree(tree: Tree, bits: Sequence[z3.BoolRef], level: int = 0) -> SymbolicByte:
    """Select the leaf addressed by ``bits[level:]``."""
    if isinstance(tree, Leaf):
        if level != len(bits):
            raise ArrayShapeError(f"Index has {len(bits)} bits but reached a leaf at depth {level}")
        return tree.value
    if level == len(bits):
        raise ArrayShapeError(f"Index has {len(bits)} bits but the tree is deeper")
    bit = bits[level]
    if is_true(bit):
        return read_tree(tree.right, bits, level + 1)
    if is_false(bit):
        return read_tree(tree.left, bits, level + 1)
    return ite(
        bit,
        read_tree(tree.right, bits, level + 1),
        read_tree(tree.left, bits, level + 1),
    )


def write_tree(tree: Tree, bits: Sequence[z3.BoolRef], value: SymbolicByte, level: int = 0) -> Tree:
    """Return a new tree with the leaf addressed by ``bits[level:]`` replaced."""
    if isinstance(tree, Leaf):
        if level != len(bits):
            raise ArrayShapeError(f"Index has {len(bits)} bits but reached a leaf at depth {level}")
        return Leaf(value)
    if level == len(bits):
        raise ArrayShapeError(f"Index has {len(bits)} bits but the tree is deeper")
    bit = bits[level]
    if is_true(bit):
        return Node(tree.left, write_tree(tree.right, bits, value, level + 1))
    if is_false(bit):
        return Node(write_tree(tree.left, bits, value, level + 1), tree.right)
    went_right = Node(tree.left, write_tree(tree.right, bits, value, level + 1))
    went_left = Node(write_tree(tree.left, bits, value, level + 1), tree.right)
    return merge_tree(bit, went_right, went_left)


def iter_leaves(tree: Tree) -> Iterator[SymbolicByte]:
    """Yield leaf values in index order."""
    if isinstance(tree, Leaf):
        yield tree.value
    else:
        yield from iter_leaves(tree.left)
        yield from iter_leaves(tree.right)


def _count(tree: Tree, seen: set[int]) -> int:
    if id(tree) in seen:
        return 0
    seen.add(id(tree))
    if isinstance(tree, Leaf):
        return 1
    return 1 + _count(tree.left, seen) + _count(tree.right, seen)


class SymbolicArray:
    """Persistent fixed-size byte array addressable by symbolic index.

    Every operation returns a new array; the receiver is never modified.
    Indices are 8-bit values, so reads and writes require an array of
    exactly 256 elements. Smaller power-of-two arrays may be built and
    merged but not indexed.
    """

    __slots__ = ("_root", "_size", "_depth")

    def __init__(self, root: Tree, size: int, depth: int) -> None:
        self._root = root
        self._size = size
        self._depth = depth

    @staticmethod
    def initial(size: int = DEFAULT_SIZE) -> SymbolicArray:
        """Array whose element ``i`` is the literal ``i``."""
        if size > DEFAULT_SIZE:
            raise ValueError(f"Array size must not exceed {DEFAULT_SIZE}: {size}")
        return SymbolicArray.from_values([SymbolicByte.from_const(i) for i in range(size)])

    @staticmethod
    def from_values(values: Sequence[SymbolicByte | int]) -> SymbolicArray:
        """Array holding ``values``; the length must be a power of two."""
        size = len(values)
        if size < 1 or size & (size - 1):
            raise ValueError(f"Array size must be a power of two: {size}")
        depth = size.bit_length() - 1
        return SymbolicArray(build_tree([coerce_byte(v) for v in values]), size, depth)

    @property
    def root(self) -> Tree:
        return self._root

    @property
    def depth(self) -> int:
        return self._depth

    def __len__(self) -> int:
        return self._size

    def _index_bits(self, index: SymbolicByte | int) -> list[z3.BoolRef]:
        if self._depth != WIDTH:
            raise ArrayShapeError(
                f"An {WIDTH}-bit index cannot address an array of size {self._size}"
            )
        return coerce_byte(index).bits_be()

    def read(self, index: SymbolicByte | int) -> SymbolicByte:
        """Value at ``index``; a symbolic index yields an If-chain over all leaves."""
        return read_tree(self._root, self._index_bits(index))

    def write(self, index: SymbolicByte | int, value: SymbolicByte | int) -> SymbolicArray:
        """New array with ``value`` stored at ``index``."""
        root = write_tree(self._root, self._index_bits(index), coerce_byte(value))
        return SymbolicArray(root, self._size, self._depth)

    def merge(self, condition: Condition, other: SymbolicArray) -> SymbolicArray:
        """If(condition, self, other), element by element."""
        if self._size != other._size:
            raise ArrayShapeError(
                f"Cannot merge arrays of size {self._size} and {other._size}"
            )
        return SymbolicArray(merge_tree(condition, self._root, other._root), self._size, self._depth)

    def leaves(self) -> list[SymbolicByte]:
        return list(iter_leaves(self._root))

    def concrete_values(self) -> list[int] | None:
        """All elements as ints, or None if any element is symbolic."""
        values = []
        for leaf in iter_leaves(self._root):
            value = leaf.concrete_value()
            if value is None:
                return None
            values.append(value)
        return values

    def node_count(self) -> int:
        """Distinct tree nodes, counting shared subtrees once."""
        return _count(self._root, set())

    def __repr__(self) -> str:
        return f"SymbolicArray(size={self._size}, nodes={self.node_count()})"


__all__ = [
    "DEFAULT_SIZE",
    "Leaf",
    "Node",
    "Tree",
    "SymbolicArray",
    "build_tree",
    "merge_tree",
    "check_congruent",
    "read_tree",
    "write_tree",
    "iter_leaves",
]
