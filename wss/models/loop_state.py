from collections import deque
from dataclasses import dataclass, field
from typing import Deque

from wss.models.run_config import RunConfig


@dataclass
class LoopState:
    """Counters carried from one sampler iteration to the next."""
    elapsed: float = 0.0
    first_reset_done: bool = False
    iterations: int = 0
    remaining_steps: Deque[float] = field(default_factory=deque)

    @classmethod
    def for_config(cls, config: RunConfig) -> "LoopState":
        return cls(remaining_steps=deque(config.profile_durations()))
