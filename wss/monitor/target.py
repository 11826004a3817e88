"""Pre-flight lookup of the target process."""
from pathlib import Path

import psutil

from wss.exceptions import TargetUnavailableError
from wss.monitor.proc_files import DEFAULT_PROC_ROOT
from wss.util.log_config import setup_logger

logger = setup_logger(__name__)


def describe_target(pid: int, proc_root: Path = DEFAULT_PROC_ROOT) -> str:
    """
    Confirm the process exists and return its name.

    The lookup goes through the same procfs mount the measurement uses, so a
    PID from another namespace's proc is checked in that namespace. Access
    errors are not fatal here: the clear_refs write that follows reports
    permission problems with the exact path.

    Raises:
        TargetUnavailableError: If the process does not exist or is a zombie
    """
    previous_root = psutil.PROCFS_PATH
    psutil.PROCFS_PATH = str(proc_root)
    try:
        name = psutil.Process(pid).name()
    except psutil.ZombieProcess as e:
        raise TargetUnavailableError(pid, None, f"PID {pid} has exited (zombie)") from e
    except psutil.NoSuchProcess as e:
        raise TargetUnavailableError(pid, None, f"PID {pid} does not exist under {proc_root}") from e
    except psutil.AccessDenied:
        logger.warning(f"⚠ Not allowed to inspect PID {pid}; continuing")
        return "?"
    finally:
        psutil.PROCFS_PATH = previous_root
    logger.info(f"Target PID {pid}: {name}")
    return name
