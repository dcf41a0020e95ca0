"""Adaptive Huffman decompression as used by MPQ archives."""

from __future__ import annotations

from typing import Optional

from d2shared.bitstream import BitStream

_END_OF_STREAM = 256
_LITERAL = 257


class _Node:
    """A tree node that is also an entry in a list kept sorted by weight.

    ``prev`` points towards heavier nodes (the head is the root), ``next``
    towards lighter ones. A node's second child is ``child0.prev``.
    """

    __slots__ = ("value", "weight", "parent", "child0", "prev", "next")

    def __init__(self, value: int, weight: int) -> None:
        self.value = value
        self.weight = weight
        self.parent: Optional[_Node] = None
        self.child0: Optional[_Node] = None
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None

    @property
    def child1(self) -> Optional[_Node]:
        return self.child0.prev if self.child0 is not None else None

    def _link_after(self, other: _Node) -> None:
        if self.next is not None:
            self.next.prev = other
            other.next = self.next
        self.next = other
        other.prev = self

    def insert(self, other: _Node) -> _Node:
        """Place ``other`` in weight order at or before this node.

        Returns ``other`` when it becomes the node right after this one,
        otherwise this node.
        """
        if other.weight <= self.weight:
            self._link_after(other)
            return other
        node = self
        while True:
            if node.prev is None:
                other.prev = None
                node.prev = other
                other.next = node
                return self
            node = node.prev
            if other.weight <= node.weight:
                node._link_after(other)
                return self


def _hex(*parts: str) -> bytes:
    return bytes.fromhex("".join(parts))


_ONES = "01" * 16

# Initial symbol weights, indexed by the compression type byte.
_PRIME_TABLES: tuple[bytes, ...] = (
    _hex("0a") + bytes(254) + _hex("02"),
    _hex(
        "5416160d0c0806050605060304040305",
        "0e0b141313090b060504030203020202",
        "0d070906060403020403030303030202",
        "09060404040403020302020202030204",
        "08030407090503030303020202030202",
        "03020202020202020201010102010202",
        "060a0808060704030404020204020303",
        "04030707090604030302010202020202",
        "0a020203020201010202020603050203",
        "02010101010101010101010203010101",
        "02010101010101020404040709080c02",
        "01010101010101010101010102010103",
        "04010204050101010101010102010101",
        "04010101010102010101010101010101",
        "02010101010101010301010101010101",
        "0201010101010102020101020202064b",
    ),
    _hex("00000000000000000003270000230000")
    + bytes(16)
    + _hex(
        "ff0101010101010102020101060e1004",
        "06080504040303020203030101020101",
        "01040204020202010104010102030302",
        "03010306040101010101010201020101",
        "0129071612400a0a112501031710262a",
        "100123232f10060702090101010101",
    ),
    _hex(
        "ff0b07050b0202020602020104020103",
        "09010101030401010201010102010101",
        "050101010d0101010101010101010101",
        "02010103010101010101010201010101",
        "0a040201060302010101010103010101",
        "05020304030303020101010201020303",
        "01030101020501010403050103010303",
        "020104030a0601010101010101010101",
        "0202010a020501010207021701050101",
        "0e010101010101010101010101010101",
        _ONES,
        _ONES,
        "06020104050101020101010102010101",
        _ONES,
        "01010101010101010701010201010101",
        "02010101010101010201010101010111",
    ),
    _hex("fffb989a848563643e3e222213131817"),
    _hex(
        "fff19d9e9a9b9a9793938c8e86888082",
        "7c7c7273696b5f6055564a4b40413737",
        "2f2f272721211b1c1717131310100d0d",
        "0b0b0909080807070605050404041918",
    ),
    _hex("c3cbf541ff7bf721")
    + bytes(56)
    + _hex("bfccf240fd7cf722")
    + bytes(56)
    + _hex("7a46"),
    _hex("c3d9ef3df97ce91efdabf12cfc5bfe17")
    + bytes(48)
    + _hex("bdd9ec3df57de81dfbaef02cfb5cff18")
    + bytes(48)
    + _hex("706c"),
    _hex("bac5da33e36dd818e594da23df4ad110", "eeafe42cea5ade15f487e921f643fc12")
    + bytes(32)
    + _hex("b0c7d833e36bd618e795d823db49d011", "e9b2e22be85cdd15f187e720f744ff13")
    + bytes(32)
    + _hex("5f9e"),
)


def _build_list(prime: bytes) -> _Node:
    """Build the weight-sorted leaf list for a table and return its tail."""
    tail = _Node(_END_OF_STREAM, 1).insert(_Node(_LITERAL, 1))
    for symbol, weight in enumerate(prime):
        if weight:
            tail = tail.insert(_Node(symbol, weight))
    return tail


def _build_tree(tail: _Node) -> Optional[_Node]:
    """Join the list's nodes pairwise into a tree and return its root."""
    current: Optional[_Node] = tail
    while current is not None and current.prev is not None:
        lighter, heavier = current, current.prev
        parent = _Node(0, lighter.weight + heavier.weight)
        parent.child0 = lighter
        lighter.parent = parent
        heavier.parent = parent
        current.insert(parent)
        current = current.prev.prev
    return current


def _adjust_tree(node: _Node) -> None:
    """Raise the weight of ``node`` and its ancestors, reordering as needed."""
    current: Optional[_Node] = node
    while current is not None:
        current.weight += 1
        swap_with = current
        while True:
            before = swap_with.prev
            if before is None or before.weight >= current.weight:
                break
            swap_with = before

        if swap_with is current:
            current = current.parent
            continue

        # Unlink swap_with and relink it right after current.
        if swap_with.prev is not None:
            swap_with.prev.next = swap_with.next
        swap_with.next.prev = swap_with.prev

        swap_with.next = current.next
        swap_with.prev = current
        if current.next is not None:
            current.next.prev = swap_with
        current.next = swap_with

        # Unlink current and relink it right after ``before``.
        current.prev.next = current.next
        current.next.prev = current.prev

        if before is None:
            raise ValueError("previous frame not defined")

        after = before.next
        current.next = after
        current.prev = before
        after.prev = current
        before.next = current

        current_parent = current.parent
        other_parent = swap_with.parent
        if current_parent is None or other_parent is None:
            raise ValueError("corrupt huffman tree")

        if current_parent.child0 is current:
            current_parent.child0 = swap_with
        if current_parent is not other_parent and other_parent.child0 is swap_with:
            other_parent.child0 = current

        current.parent = other_parent
        swap_with.parent = current_parent
        current = current.parent


def _insert_node(tail: _Node, value: int) -> _Node:
    """Split ``tail`` to add a leaf for ``value``; return the node before ``tail``."""
    new_tail = tail.prev

    duplicate = _Node(tail.value, tail.weight)
    duplicate.parent = tail

    leaf = _Node(value, 0)
    leaf.parent = tail
    tail.child0 = leaf

    tail.next = duplicate
    duplicate.prev = tail
    leaf.prev = duplicate
    duplicate.next = leaf

    _adjust_tree(leaf)
    _adjust_tree(leaf)
    return new_tail


def _decode(stream: BitStream, root: _Node) -> _Node:
    node = root
    while node.child0 is not None:
        try:
            bit = stream.read_bits(1)
        except EOFError:
            raise EOFError("unexpected end of file") from None
        node = node.child0 if bit == 0 else node.child1
    return node


def huffman_decompress(data: bytes) -> bytes:
    """Decompress a block whose first byte selects the prime table."""
    if not data:
        raise ValueError("missing compression type")
    compression_type = data[0]
    if compression_type == 0:
        raise ValueError("compression type 0 is not currently supported")
    if compression_type >= len(_PRIME_TABLES):
        raise ValueError(f"unknown compression type {compression_type}")

    tail = _build_list(_PRIME_TABLES[compression_type])
    root = _build_tree(tail)

    output = bytearray()
    stream = BitStream(data[1:])
    while True:
        value = _decode(stream, root).value
        if value == _END_OF_STREAM:
            break
        if value == _LITERAL:
            literal = stream.read_bits(8)
            output.append(literal)
            tail = _insert_node(tail, literal)
        else:
            output.append(value & 0xFF)
    return bytes(output)