"""Free-RAM counter and per-application flags kept in a named shared-memory block."""

from __future__ import annotations

import struct
from multiprocessing import shared_memory

DEFAULT_NAME = "ossim_ram"
BLOCK_SIZE = 1024
_SLOT = struct.Struct("=f")
SLOT_COUNT = BLOCK_SIZE // _SLOT.size
RAM_SLOT = 0
RESET_FLAGS = range(1, 11)


class SharedRam:
    """Slot 0 holds the free RAM in GB; the other slots are application flags."""

    def __init__(self, block: shared_memory.SharedMemory) -> None:
        self._block = block

    @classmethod
    def create(cls, name: str = DEFAULT_NAME, total: float = 0.0) -> "SharedRam":
        """Create the block (or reuse an existing one) and reset it to ``total``."""
        try:
            block = shared_memory.SharedMemory(name=name, create=True, size=BLOCK_SIZE)
        except FileExistsError:
            block = shared_memory.SharedMemory(name=name)
        ram = cls(block)
        ram._write(RAM_SLOT, total)
        for index in RESET_FLAGS:
            ram._write(index, 0.0)
        return ram

    @classmethod
    def attach(cls, name: str = DEFAULT_NAME) -> "SharedRam":
        """Attach to an existing block; raises FileNotFoundError if there is none."""
        return cls(shared_memory.SharedMemory(name=name))

    @property
    def name(self) -> str:
        return self._block.name

    @property
    def available(self) -> float:
        return self._read(RAM_SLOT)

    def consume(self, amount: float) -> float:
        """Take ``amount`` GB and return what is left."""
        remaining = self.available - amount
        self._write(RAM_SLOT, remaining)
        return self.available

    def release(self, amount: float) -> float:
        """Give back ``amount`` GB and return what is left."""
        return self.consume(-amount)

    def set_flag(self, index: int, value: float) -> None:
        self._write(self._flag_index(index), value)

    def flag(self, index: int) -> float:
        return self._read(self._flag_index(index))

    def close(self) -> None:
        self._block.close()

    def unlink(self) -> None:
        self._block.unlink()

    def __enter__(self) -> "SharedRam":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @staticmethod
    def _flag_index(index: int) -> int:
        if not 1 <= index < SLOT_COUNT:
            raise IndexError(f"flag index {index} out of range 1..{SLOT_COUNT - 1}")
        return index

    def _read(self, index: int) -> float:
        (value,) = _SLOT.unpack_from(self._block.buf, index * _SLOT.size)
        return value

    def _write(self, index: int, value: float) -> None:
        _SLOT.pack_into(self._block.buf, index * _SLOT.size, value)