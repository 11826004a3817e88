"""Models for sampler data structures."""

from .loop_state import LoopState
from .memory_sample import KB_PER_MB, MemorySample
from .run_config import MIN_DURATION, RunConfig

__all__ = ["LoopState", "MemorySample", "RunConfig", "KB_PER_MB", "MIN_DURATION"]
