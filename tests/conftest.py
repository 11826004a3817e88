"""
Shared fixtures: a fake proc tree under tmp_path and a sleep recorder so the
sampler loop runs without real waits.
"""
from pathlib import Path
from typing import List

import pytest

FAKE_PID = 4242

SMAPS_TWO_MAPPINGS = """\
55d0c0a00000-55d0c0a21000 r--p 00000000 fd:01 1314 /usr/bin/cat
Size:                132 kB
KernelPageSize:        4 kB
MMUPageSize:           4 kB
Rss:                 128 kB
Pss:                  64 kB
Pss_Dirty:             0 kB
Shared_Clean:        128 kB
Shared_Dirty:          0 kB
Private_Clean:         0 kB
Private_Dirty:         0 kB
Referenced:          100 kB
Anonymous:             0 kB
SwapPss:               0 kB
VmFlags: rd mr mw me dw sd
7f3a2c000000-7f3a2c400000 rw-p 00000000 00:00 0 [heap]
Size:               4096 kB
Rss:                1920 kB
Pss:                1920 kB
Referenced:          924 kB
Anonymous:          1920 kB
VmFlags: rd wr mr mw me ac sd
"""


class FakeProc:
    """A /proc/<pid> directory with clear_refs and smaps files."""

    def __init__(self, root: Path, pid: int):
        self.root = root
        self.pid = pid
        self.dir = root / str(pid)
        self.dir.mkdir(parents=True)
        self.clear_refs = self.dir / "clear_refs"
        self.smaps = self.dir / "smaps"
        self.clear_refs.write_text("")
        self.smaps.write_text(SMAPS_TWO_MAPPINGS)

    def set_smaps(self, text: str) -> None:
        self.smaps.write_text(text)


class SleepRecorder:
    """Stands in for time.sleep; remembers every requested duration."""

    def __init__(self):
        self.calls: List[float] = []
        self.on_sleep = None

    def __call__(self, secs: float) -> None:
        self.calls.append(secs)
        if self.on_sleep is not None:
            self.on_sleep(len(self.calls), secs)


@pytest.fixture
def fake_proc(tmp_path):
    return FakeProc(tmp_path / "proc", FAKE_PID)


@pytest.fixture
def sleep_recorder():
    return SleepRecorder()
