"""
Sampler Loop

Estimates a process's working set size by resetting its referenced page
flags, sleeping for a window, then summing Rss/Pss/Referenced from smaps.
Each iteration prints one line; the active mode decides when to reset again
and when to stop.
"""
import sys
import time
from pathlib import Path
from typing import Callable, Optional, TextIO

from wss.consts.SampleMode import SampleMode
from wss.exceptions import TargetUnavailableError
from wss.models.loop_state import LoopState
from wss.models.memory_sample import MemorySample
from wss.models.run_config import RunConfig
from wss.monitor.proc_files import DEFAULT_PROC_ROOT, read_smaps, reset_referenced, smaps_path
from wss.monitor.report import column_header, describe_mode, format_sample
from wss.monitor.smaps_parser import parse_smaps
from wss.util.log_config import setup_logger

logger = setup_logger(__name__)


class WssSampler:
    """Run the measurement loop for one target process"""

    def __init__(
        self,
        config: RunConfig,
        proc_root: Path = DEFAULT_PROC_ROOT,
        out: Optional[TextIO] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        """
        Initialize the sampler.

        Args:
            config: Parsed run configuration
            proc_root: Mount point of procfs (default: /proc)
            out: Stream receiving the measurement table (default: stdout)
            sleep: Blocking wait used for windows and pauses (default: time.sleep)
        """
        self.config = config
        self.proc_root = proc_root
        self.out = out if out is not None else sys.stdout
        self._sleep = sleep if sleep is not None else time.sleep

    def run(self) -> int:
        """
        Print the header, then sample until the mode says stop.

        Returns:
            Number of sample lines printed
        """
        self._emit(describe_mode(self.config))
        self._emit(column_header(self.config))

        state = LoopState.for_config(self.config)
        while self.step(state):
            pass
        logger.info(f"Finished after {state.iterations} sample(s), {state.elapsed:.3f}s elapsed")
        return state.iterations

    def step(self, state: LoopState) -> bool:
        """
        Run one iteration against the loop state.

        Returns:
            True if another iteration should follow
        """
        config = self.config

        # reset referenced flags
        if not state.first_reset_done or config.resets_every_iteration:
            reset_referenced(config.pid, self.proc_root)
            state.first_reset_done = True

        # measurement window
        step_duration = None
        if config.mode == SampleMode.PROFILE:
            if not state.remaining_steps:
                logger.debug("Profile steps exhausted")
                return False
            step_duration = state.remaining_steps.popleft()
            sleep_secs = step_duration
        else:
            sleep_secs = config.duration
        self._sleep(sleep_secs)
        state.elapsed += sleep_secs

        sample = self._measure()
        self._emit(format_sample(sample, step_duration))
        state.iterations += 1

        if config.mode == SampleMode.SNAPSHOT:
            self._sleep(config.pause)
            state.elapsed += config.pause

        return self._should_continue(state)

    def _measure(self) -> MemorySample:
        pid = self.config.pid
        lines = read_smaps(pid, self.proc_root)
        try:
            return parse_smaps(lines)
        except ValueError as e:
            path = smaps_path(pid, self.proc_root)
            raise TargetUnavailableError(pid, path, f"unreadable {path}: {e}") from e

    def _should_continue(self, state: LoopState) -> bool:
        if not self.config.repeats:
            return False
        if state.elapsed >= self.config.total_secs:
            logger.debug(f"Total duration {self.config.total_secs}s reached")
            return False
        return True

    def _emit(self, line: str) -> None:
        print(line, file=self.out, flush=True)
