"""Tree-address resolution over cell trees.

Address 1 is the root; 2 and 3 are its head and tail. Below the leading 1,
each bit of the address picks the head (0) or the tail (1) at successive
depths, so 6 is the head of the tail and 7 is the tail of the tail.
"""

from __future__ import annotations

from .errors import InvalidAddressError, MissingChildError
from .values import Cell, Noun, is_atom


def resolve(address: Noun, noun: Noun) -> Noun:
    if not is_atom(address):
        raise InvalidAddressError(address)
    if address == 0:
        raise InvalidAddressError(address)

    node = noun
    axis = 1
    for bit in bin(address)[3:]:
        if not isinstance(node, Cell):
            raise MissingChildError(address, axis, node)
        if bit == "0":
            node = node.head
            axis = axis * 2
        else:
            node = node.tail
            axis = axis * 2 + 1
    return node
