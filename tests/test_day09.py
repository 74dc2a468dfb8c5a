from collections import Counter

import pytest

from adventsolve.day09 import (
    checksum_blocks,
    checksum_disk,
    compact,
    compact_blocks,
    create_blocks,
    create_disk,
    part1,
    part2,
)

EXAMPLE = "2333133121414131402\n"


def _starts(blocks):
    starts = {}
    position = 0
    for file_id, size in blocks:
        if file_id is not None:
            starts[file_id] = position
        position += size
    return starts


def test_part1_example():
    assert part1(EXAMPLE) == 1928


def test_part2_example():
    assert part2(EXAMPLE) == 2858


def test_create_disk_layout():
    assert create_disk("12345") == [
        0, None, None, 1, 1, 1, None, None, None, None, 2, 2, 2, 2, 2,
    ]


def test_create_blocks_expands_to_disk():
    expanded = [
        file_id for file_id, size in create_blocks(EXAMPLE) for _ in range(size)
    ]
    assert expanded == create_disk(EXAMPLE)


def test_compact_moves_all_files_left_and_keeps_blocks():
    original = create_disk(EXAMPLE)
    compacted = compact(original)
    files = [value for value in compacted if value is not None]
    assert compacted[: len(files)] == files
    assert Counter(files) == Counter(v for v in original if v is not None)


def test_compact_leaves_input_untouched():
    disk = create_disk("12345")
    snapshot = list(disk)
    compact(disk)
    assert disk == snapshot


def test_compact_blocks_preserves_length_and_files():
    blocks = create_blocks(EXAMPLE)
    result = compact_blocks(blocks)
    assert sum(size for _, size in result) == sum(size for _, size in blocks)
    assert sorted((f, s) for f, s in result if f is not None) == sorted(
        (f, s) for f, s in blocks if f is not None
    )


def test_compact_blocks_never_moves_a_file_right():
    blocks = create_blocks(EXAMPLE)
    before = _starts(blocks)
    after = _starts(compact_blocks(blocks))
    assert before.keys() == after.keys()
    assert all(after[file_id] <= before[file_id] for file_id in before)


def test_checksums_agree_on_same_layout():
    assert checksum_disk(create_disk(EXAMPLE)) == checksum_blocks(create_blocks(EXAMPLE))


def test_free_space_counts_as_zero():
    assert checksum_disk([None, 1, None]) == checksum_disk([0, 1, 0])


def test_invalid_digit_is_rejected():
    with pytest.raises(ValueError):
        create_disk("12a4")
    with pytest.raises(ValueError):
        create_blocks("9x")


def test_empty_disk_cannot_be_compacted():
    with pytest.raises(ValueError):
        compact([])
    with pytest.raises(ValueError):
        compact_blocks([])