"""A disk-backed set of OSM ids with a bloom filter in front of it."""

from __future__ import annotations

import heapq
import struct
import tempfile
from bisect import bisect_left, bisect_right
from collections.abc import Iterator

BLOOM_BITS = 214748357

_BLOCK_BYTES = 8 * 64 * 1024
_SORT_BYTES = 8 * 64 * 1024
_IDS_PER_BLOCK = _BLOCK_BYTES // 8
_SEED = 469954432
_HASHES = 5
_MASK32 = 0xFFFFFFFF
_U64_MAX = 2**64 - 1


def _rotl32(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK32


def murmur3_32(data: bytes, seed: int = 0) -> int:
    """MurmurHash3 x86 32-bit hash of data."""
    c1, c2 = 0xCC9E2D51, 0x1B873593
    h = seed & _MASK32
    body = len(data) // 4 * 4
    for (k,) in struct.iter_unpack("<I", data[:body]):
        k = (k * c1) & _MASK32
        k = _rotl32(k, 15)
        k = (k * c2) & _MASK32
        h ^= k
        h = _rotl32(h, 13)
        h = (h * 5 + 0xE6546B64) & _MASK32
    tail = data[body:]
    if tail:
        k = int.from_bytes(tail, "little")
        k = (k * c1) & _MASK32
        k = _rotl32(k, 15)
        k = (k * c2) & _MASK32
        h ^= k
    h ^= len(data)
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & _MASK32
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & _MASK32
    h ^= h >> 16
    return h


def jenkins(value: int) -> int:
    """Jenkins' 32-bit integer hash of the low 32 bits of value, shifted right by 2."""
    v = value & _MASK32
    v = ((v + 0x7ED55D16) + (v << 12)) & _MASK32
    v = ((v ^ 0xC761C23C) ^ (v >> 19)) & _MASK32
    v = ((v + 0x165667B1) + (v << 5)) & _MASK32
    v = ((v + 0xD3A2646C) ^ (v << 9)) & _MASK32
    v = ((v + 0xFD7046C5) + (v << 3)) & _MASK32
    v = ((v ^ 0xB55A4F09) ^ (v >> 16)) & _MASK32
    return v >> 2


def _pack(ids: list[int]) -> bytes:
    return struct.pack(f"<{len(ids)}Q", *ids)


def _unpack(data: bytes) -> list[int]:
    usable = len(data) // 8 * 8
    return [v for (v,) in struct.iter_unpack("<Q", data[:usable])]


class OsmIdSet:
    """A set of OSM ids stored in a temporary file.

    Ids are first added; the first lookup closes the set, sorting the file
    if ids came out of order. Ids known not to be in the set may be
    registered with nadd to let the bloom filter answer more lookups.
    """

    def __init__(self, bloom_bits: int = BLOOM_BITS) -> None:
        if bloom_bits <= 0:
            raise ValueError("bloom_bits must be positive")
        self._bits = bloom_bits
        self._bitset = bytearray((bloom_bits + 7) // 8)
        self._bitset_not_in: bytearray | None = None
        self._file = tempfile.TemporaryFile()
        self._out: list[int] = []
        self._block_ends: list[int] = []
        self._count = 0
        self._closed = False
        self._sorted = True
        self._last = 0
        self._smallest = _U64_MAX
        self._biggest = 0
        self._cur_block: int | None = None
        self._cur_ids: list[int] = []
        self.lookups = 0
        self.file_lookups = 0

    def _positions(self, osm_id: int) -> Iterator[int]:
        h1 = murmur3_32(struct.pack("<Q", osm_id), _SEED)
        h2 = jenkins(osm_id)
        for i in range(_HASHES):
            yield ((h1 + i * h2) & _MASK32) % self._bits

    @staticmethod
    def _set_bit(bits: bytearray, pos: int) -> None:
        bits[pos >> 3] |= 1 << (pos & 7)

    @staticmethod
    def _get_bit(bits: bytearray, pos: int) -> bool:
        return bool(bits[pos >> 3] & (1 << (pos & 7)))

    def _check_open(self, osm_id: int) -> None:
        if self._closed:
            raise RuntimeError("cannot add to a closed id set")
        if not 0 <= osm_id <= _U64_MAX:
            raise ValueError(f"OSM id out of range: {osm_id}")

    def add(self, osm_id: int) -> None:
        """Add an id to the set."""
        self._check_open(osm_id)
        self._disk_add(osm_id)
        if self._last > osm_id:
            self._sorted = False
        self._last = osm_id
        self._smallest = min(self._smallest, osm_id)
        self._biggest = max(self._biggest, osm_id)
        for pos in self._positions(osm_id):
            self._set_bit(self._bitset, pos)

    def nadd(self, osm_id: int) -> None:
        """Register an id that is known not to be in the set."""
        self._check_open(osm_id)
        if self._bitset_not_in is None:
            self._bitset_not_in = bytearray(len(self._bitset))
        for pos in self._positions(osm_id):
            self._set_bit(self._bitset_not_in, pos)

    def has(self, osm_id: int) -> bool:
        """Whether the id was added; closes the set on first use."""
        self.lookups += 1
        if not self._closed:
            self.close()
        if osm_id < self._smallest or osm_id > self._biggest:
            return False
        not_in = self._bitset_not_in
        for pos in self._positions(osm_id):
            if not self._get_bit(self._bitset, pos):
                return False
            if not_in is not None and not self._get_bit(not_in, pos):
                return True
        return self._disk_has(osm_id)

    def __contains__(self, osm_id: int) -> bool:
        return self.has(osm_id)

    def close(self) -> None:
        """Finish adding: flush pending ids and sort the file if needed."""
        if self._closed:
            return
        self._flush()
        self._block_ends.append(self._biggest)
        self._closed = True
        if not self._sorted:
            self._sort()

    def release(self) -> None:
        """Close the temporary file backing the set."""
        self._file.close()

    def __enter__(self) -> OsmIdSet:
        return self

    def __exit__(self, *args: object) -> None:
        self.release()

    def _disk_add(self, osm_id: int) -> None:
        self._out.append(osm_id)
        if len(self._out) == _IDS_PER_BLOCK:
            self._block_ends.append(osm_id)
            self._flush()

    def _flush(self) -> None:
        if self._out:
            self._file.seek(self._count * 8)
            self._file.write(_pack(self._out))
            self._count += len(self._out)
            self._out.clear()

    def _read_run(self, start: int, length: int, bufsize: int) -> Iterator[int]:
        pos, end = start, start + length
        while pos < end:
            self._file.seek(pos)
            data = self._file.read(min(bufsize, end - pos))
            if not data:
                return
            pos += len(data)
            yield from _unpack(data)

    def _sort(self) -> None:
        total = self._count * 8
        runs: list[tuple[int, int]] = []
        for start in range(0, total, _SORT_BYTES):
            self._file.seek(start)
            data = self._file.read(_SORT_BYTES)
            ids = sorted(_unpack(data))
            self._file.seek(start)
            self._file.write(_pack(ids))
            runs.append((start, len(ids) * 8))

        parts = total // _SORT_BYTES + 1
        run_buf = ((_SORT_BYTES // 8) // parts + 1) * 8
        merged = heapq.merge(*(self._read_run(s, n, run_buf) for s, n in runs))

        new_file = tempfile.TemporaryFile()
        self._block_ends = []
        batch: list[int] = []
        for written, osm_id in enumerate(merged, 1):
            batch.append(osm_id)
            if written % _IDS_PER_BLOCK == 0:
                self._block_ends.append(osm_id)
                new_file.write(_pack(batch))
                batch.clear()
        if batch:
            new_file.write(_pack(batch))

        self._file.close()
        self._file = new_file
        self._sorted = True
        self._cur_block = None
        self._cur_ids = []

    def _disk_has(self, osm_id: int) -> bool:
        ends = self._block_ends
        i = bisect_left(ends, osm_id)
        if i < len(ends) and ends[i] == osm_id:
            return True

        block = bisect_right(ends, osm_id)
        if block != self._cur_block:
            self._file.seek(block * _BLOCK_BYTES)
            self._cur_ids = _unpack(self._file.read(_BLOCK_BYTES))
            self.file_lookups += 1
            self._cur_block = block

        ids = self._cur_ids
        if not ids or ids[0] > osm_id:
            return False
        j = bisect_left(ids, osm_id)
        return j < len(ids) and ids[j] == osm_id