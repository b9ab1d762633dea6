from __future__ import annotations

from dataclasses import dataclass

ROW_WIDTH = 16


@dataclass(frozen=True)
class AlignedRange:
    start: int
    end: int
    aligned_start: int

    @property
    def row_count(self) -> int:
        if self.end <= self.aligned_start:
            return 0
        return (self.end - self.aligned_start + ROW_WIDTH - 1) // ROW_WIDTH

    def row_offsets(self) -> range:
        return range(self.aligned_start, self.end, ROW_WIDTH)


def resolve(requested_start: int, requested_end: int, file_len: int) -> AlignedRange:
    """Clamp a requested [start, end) window to the file and align it to rows.

    An end of 0 means "to the end of the file". A start past the end is left
    alone; it simply yields no rendered cells.
    """
    end = requested_end
    if end == 0 or end > file_len:
        end = file_len
    start = requested_start
    aligned_start = start - (start % ROW_WIDTH)
    return AlignedRange(start=start, end=end, aligned_start=aligned_start)
