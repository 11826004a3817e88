from dataclasses import dataclass
from typing import List

from wss.consts.SampleMode import SampleMode

MIN_DURATION = 0.001  # seconds
UNBOUNDED_TOTAL_SECS = 999999999.0


@dataclass(frozen=True)
class RunConfig:
    """Immutable measurement parameters, built once from the command line."""
    pid: int
    duration: float
    mode: SampleMode = SampleMode.SINGLE
    pause: float = 0.0
    total_secs: float = UNBOUNDED_TOTAL_SECS
    profile_steps: int = 0

    @property
    def resets_every_iteration(self) -> bool:
        return self.mode == SampleMode.SNAPSHOT

    @property
    def repeats(self) -> bool:
        return self.mode != SampleMode.SINGLE

    def profile_durations(self) -> List[float]:
        """Sleep durations for profile mode: start at duration, double each step."""
        durations = []
        d = self.duration
        for _ in range(self.profile_steps):
            durations.append(d)
            d *= 2
        return durations

    def __str__(self):
        return (f"RunConfig(\n"
                f"  pid={self.pid},\n"
                f"  duration={self.duration},\n"
                f"  mode={self.mode.value},\n"
                f"  pause={self.pause},\n"
                f"  total_secs={self.total_secs},\n"
                f"  profile_steps={self.profile_steps}\n"
                f")")
