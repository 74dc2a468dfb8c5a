"""Disk map compaction and filesystem checksums."""

from itertools import islice

_DIGITS = frozenset("0123456789")


def _sizes(text):
    digits = text.rstrip()
    for char in digits:
        if char not in _DIGITS:
            raise ValueError(f"disk map may only hold digits, got {char!r}")
    return [int(char) for char in digits]


def create_disk(text):
    """Expand a disk map into one entry per block: a file id or None for free space."""
    disk = []
    for index, size in enumerate(_sizes(text)):
        file_id = index // 2 if index % 2 == 0 else None
        disk.extend([file_id] * size)
    return disk


def create_blocks(text):
    """Turn a disk map into (file id or None, length) spans."""
    return [
        (index // 2 if index % 2 == 0 else None, size)
        for index, size in enumerate(_sizes(text))
    ]


def compact(disk):
    """Move file blocks one at a time from the end into the leftmost free block."""
    data = list(disk)
    if not data:
        raise ValueError("cannot compact an empty disk")
    left = 0
    while left < len(data) - 1:
        if data[left] is not None:
            left += 1
            continue
        last = data.pop()
        if last is not None:
            data[left] = last
    return data


def _first_fit(blocks, limit, size):
    candidates = islice(enumerate(blocks), limit)
    return next(
        (i for i, (file_id, free) in candidates if file_id is None and free >= size),
        None,
    )


def compact_blocks(blocks):
    """Move whole files, last first, into the leftmost free span that fits."""
    blocks = list(blocks)
    if not blocks:
        raise ValueError("cannot compact an empty disk")
    current = len(blocks) - 1
    while current != 0:
        file_id, size = blocks[current]
        if file_id is None:
            current -= 1
            continue
        target = _first_fit(blocks, current, size)
        if target is None:
            current -= 1
            continue
        free = blocks[target][1]
        blocks[target] = blocks[current]
        blocks[current] = (None, size)
        if free == size:
            current -= 1
        else:
            blocks.insert(target + 1, (None, free - size))
    return blocks


def checksum_disk(disk):
    """Sum of position times file id over every block; free space counts as zero."""
    return sum(position * (file_id or 0) for position, file_id in enumerate(disk))


def checksum_blocks(blocks):
    """Checksum of a span list, as if it were expanded into single blocks."""
    total = 0
    position = 0
    for file_id, size in blocks:
        if file_id is not None:
            total += file_id * sum(range(position, position + size))
        position += size
    return total


def part1(text):
    return checksum_disk(compact(create_disk(text)))


def part2(text):
    return checksum_blocks(compact_blocks(create_blocks(text)))