"""A first-fit heap allocator over a simulated anonymous-mapping address space.

Blocks form one ordered list. A request takes the first free block large
enough, splitting it when the rest can hold another header; otherwise a
new region is mapped and its block appended. Freeing a block merges it
with free neighbours in a single forward pass.
"""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass, replace
from typing import Sequence

HEADER_SIZE = 24
PAGE_SIZE = 4096
BASE_ADDRESS = 0x10000


@dataclass
class Block:
    """A block of the heap; ``address`` is where its payload starts."""

    address: int
    size: int
    free: bool


class Heap:
    """The allocator state and the memory it hands out."""

    def __init__(self) -> None:
        self._blocks: list[Block] = []
        self._memory = bytearray()

    def _map(self, size: int) -> int:
        length = size + HEADER_SIZE
        pages = -(-length // PAGE_SIZE)
        base = BASE_ADDRESS + len(self._memory)
        self._memory.extend(bytes(pages * PAGE_SIZE))
        return base + HEADER_SIZE

    def _offset(self, address: int, length: int) -> int:
        offset = address - BASE_ADDRESS
        if length < 0 or offset < 0 or offset + length > len(self._memory):
            raise ValueError(f"address {address:#x} is outside the heap")
        return offset

    def _split(self, index: int, size: int) -> None:
        block = self._blocks[index]
        rest = Block(
            block.address + size + HEADER_SIZE,
            block.size - size - HEADER_SIZE,
            True,
        )
        block.size = size
        self._blocks.insert(index + 1, rest)

    def _combine(self) -> None:
        index = 0
        while index + 1 < len(self._blocks):
            current, following = self._blocks[index], self._blocks[index + 1]
            if current.free and following.free:
                current.size += following.size + HEADER_SIZE
                del self._blocks[index + 1]
            index += 1

    def malloc(self, size: int) -> int | None:
        """Allocate ``size`` bytes and return the payload address.

        A zero size returns None; a negative size raises ValueError.
        """
        if size < 0:
            raise ValueError("size must not be negative")
        if size == 0:
            return None
        index = next(
            (i for i, b in enumerate(self._blocks) if b.free and b.size >= size),
            None,
        )
        if index is None:
            block = Block(self._map(size), size, False)
            self._blocks.append(block)
            return block.address
        block = self._blocks[index]
        if block.size > size + HEADER_SIZE:
            self._split(index, size)
        block.free = False
        return block.address

    def calloc(self, nelem: int, size: int) -> int | None:
        """Allocate ``nelem * size`` zeroed bytes; None for a zero total."""
        total = nelem * size
        if total <= 0:
            return None
        address = self.malloc(total)
        if address is not None:
            self.write(address, bytes(total))
        return address

    def free(self, address: int | None) -> None:
        """Release the block at ``address``; None is ignored.

        Raises ValueError when no block starts at ``address``.
        """
        if address is None:
            return
        block = next((b for b in self._blocks if b.address == address), None)
        if block is None:
            raise ValueError(f"no block at address {address:#x}")
        block.free = True
        self._combine()

    def read(self, address: int, size: int) -> bytes:
        """Return ``size`` bytes starting at ``address``."""
        offset = self._offset(address, size)
        return bytes(self._memory[offset : offset + size])

    def write(self, address: int, data: bytes) -> None:
        """Store ``data`` starting at ``address``."""
        offset = self._offset(address, len(data))
        self._memory[offset : offset + len(data)] = data

    def blocks(self) -> list[Block]:
        """Copies of the heap's blocks, in list order."""
        return [replace(block) for block in self._blocks]

    def info(self) -> str:
        """Describe the heap: total block size and each block in turn."""
        total = sum(block.size for block in self._blocks)
        lines = [f"The total size occupied by heap is: {total} \n"]
        if self._blocks:
            lines.append("The structure of the free list of heap is: \n")
            lines.extend(
                f"Memory block no. {number} of {block.size} size and occupied: "
                f"{'false' if block.free else 'true'} \n"
                for number, block in enumerate(self._blocks, start=1)
            )
        return "".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Exercise the allocator with an int, a char array and a double."""
    heap = Heap()

    int_size = struct.calcsize("=i")
    address = heap.malloc(int_size)
    heap.write(address, struct.pack("=i", 42))
    print(f"my_malloc for int: {struct.unpack('=i', heap.read(address, int_size))[0]}")
    sys.stderr.write(heap.info())
    heap.free(address)
    sys.stderr.write(heap.info())

    address = heap.calloc(20, 1)
    heap.write(address, bytes(ord("A") + i for i in range(20)))
    print(f"my_calloc for char array: {heap.read(address, 20).decode('ascii')}")
    sys.stderr.write(heap.info())
    heap.free(address)
    print(f"my_calloc batman for char array: {heap.read(address, 20).decode('ascii')}")
    sys.stderr.write(heap.info())

    double_size = struct.calcsize("=d")
    address = heap.malloc(double_size)
    heap.write(address, struct.pack("=d", 3.14))
    value = struct.unpack("=d", heap.read(address, double_size))[0]
    print(f"my_malloc for double: {value:f}")
    sys.stderr.write(heap.info())
    heap.free(address)
    sys.stderr.write(heap.info())
    return 0


if __name__ == "__main__":
    sys.exit(main())