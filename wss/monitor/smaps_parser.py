"""
smaps parsing.

Only lines that start with one of the labels in SMAPS_FIELDS are split;
every other line is skipped untokenized. Values are kibibytes, e.g.

    Rss:                 884 kB
"""
from typing import Iterable, Tuple

from wss.models.memory_sample import MemorySample

# Checked in order; label -> MemorySample attribute it accumulates into.
SMAPS_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("Rss:", "rss_kb"),
    ("Pss:", "pss_kb"),
    ("Referenced:", "referenced_kb"),
)


def _field_for(line: str):
    for label, attr in SMAPS_FIELDS:
        if line.startswith(label):
            return attr
    return None


def parse_smaps(lines: Iterable[str]) -> MemorySample:
    """Sum the recognized fields across every mapping block."""
    sample = MemorySample()
    for line in lines:
        attr = _field_for(line)
        if attr is None:
            continue
        # now pay the split cost, after filtering out most lines
        parts = line.split()
        if len(parts) < 2:
            raise ValueError(f"Malformed smaps line: {line.rstrip()!r}")
        setattr(sample, attr, getattr(sample, attr) + int(parts[1]))
    return sample
