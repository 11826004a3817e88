"""
Access to the two per-process proc files the measurement relies on.

Both files are opened fresh on every call and closed immediately; nothing is
held open between iterations.

WARNING: writing clear_refs and reading smaps make the kernel walk the
target's page tables. For very large processes this adds latency to the
target for the duration of the walk.
"""
import time
from pathlib import Path
from typing import List

from wss.exceptions import TargetUnavailableError
from wss.util.log_config import setup_logger

DEFAULT_PROC_ROOT = Path("/proc")
CLEAR_REFS_ALL = "1"

logger = setup_logger(__name__)


def clear_refs_path(pid: int, proc_root: Path = DEFAULT_PROC_ROOT) -> Path:
    return proc_root / str(pid) / "clear_refs"


def smaps_path(pid: int, proc_root: Path = DEFAULT_PROC_ROOT) -> Path:
    return proc_root / str(pid) / "smaps"


def reset_referenced(pid: int, proc_root: Path = DEFAULT_PROC_ROOT) -> None:
    """
    Clear the referenced flag on every page mapped by the process.

    Raises:
        TargetUnavailableError: If clear_refs cannot be opened or written
            (process exited, insufficient privilege, or kernel too old)
    """
    path = clear_refs_path(pid, proc_root)
    try:
        with open(path, "w") as f:
            f.write(CLEAR_REFS_ALL)
    except OSError as e:
        raise TargetUnavailableError(
            pid, path,
            f"can't open {path} (older kernel?): {e.strerror or e}",
            cause=e,
        ) from e
    logger.debug(f"Reset referenced flags for PID {pid}")


def read_smaps(pid: int, proc_root: Path = DEFAULT_PROC_ROOT) -> List[str]:
    """
    Read all of smaps in one go.

    The whole file is slurped before any parsing so the read itself adds as
    few page references as possible.

    Raises:
        TargetUnavailableError: If smaps cannot be opened or read
    """
    path = smaps_path(pid, proc_root)
    start = time.perf_counter()
    try:
        # mapping names are arbitrary bytes; only the ASCII field lines matter
        with open(path, "r", encoding="utf-8", errors="surrogateescape") as f:
            lines = f.readlines()
    except OSError as e:
        raise TargetUnavailableError(
            pid, path,
            f"can't open {path}: {e.strerror or e}",
            cause=e,
        ) from e
    logger.debug(f"Read {len(lines)} smaps lines for PID {pid} in {time.perf_counter() - start:.4f}s")
    return lines
