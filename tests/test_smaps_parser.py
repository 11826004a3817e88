"""
Tests for smaps parsing and the kB -> MB conversion
"""
import pytest

from wss.models.memory_sample import KB_PER_MB, MemorySample
from wss.monitor.smaps_parser import SMAPS_FIELDS, parse_smaps

from conftest import SMAPS_TWO_MAPPINGS


def test_sums_fields_across_mappings():
    sample = parse_smaps(SMAPS_TWO_MAPPINGS.splitlines(keepends=True))

    assert sample.rss_kb == 128 + 1920
    assert sample.pss_kb == 64 + 1920
    assert sample.referenced_kb == 100 + 924


def test_similar_labels_are_not_counted():
    lines = [
        "Pss_Dirty:            8 kB\n",
        "Pss_Anon:            16 kB\n",
        "SwapPss:             32 kB\n",
        "Pss:                  4 kB\n",
    ]

    sample = parse_smaps(lines)

    assert sample.pss_kb == 4
    assert sample.rss_kb == 0
    assert sample.referenced_kb == 0


def test_empty_snapshot_gives_zero_totals():
    assert parse_smaps([]) == MemorySample(0, 0, 0)


def test_header_lines_are_skipped():
    # mapping header lines contain arbitrary text and are never tokenized
    lines = ["7ffd1a7e2000-7ffd1a803000 rw-p 00000000 00:00 0 [stack]\n", "Rss: 8 kB\n"]

    assert parse_smaps(lines).rss_kb == 8


def test_malformed_recognized_line_raises():
    with pytest.raises(ValueError):
        parse_smaps(["Rss:\n"])


def test_field_table_order():
    assert [label for label, _ in SMAPS_FIELDS] == ["Rss:", "Pss:", "Referenced:"]


def test_megabyte_conversion():
    sample = MemorySample(rss_kb=2048, pss_kb=512, referenced_kb=1536)

    assert KB_PER_MB == 1024
    assert sample.rss_mb == 2.0
    assert sample.pss_mb == 0.5
    assert sample.referenced_mb == 1.5


def test_referenced_never_exceeds_rss_for_consistent_snapshot():
    sample = parse_smaps(SMAPS_TWO_MAPPINGS.splitlines())

    assert 0 <= sample.referenced_kb <= sample.rss_kb
