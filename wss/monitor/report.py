"""
Text output of the sampler: the mode description, the column header, and
one line per sample.

COLUMNS:
    - RSS(MB): Resident Set Size (Mbytes). The main memory size.
    - PSS(MB): Proportional Set Size (Mbytes). Accounting for shared pages.
    - Ref(MB): Referenced (Mbytes) during the measured window.
               This is the working set size metric.
"""
from typing import Optional

from wss.consts.SampleMode import SampleMode
from wss.models.memory_sample import MemorySample
from wss.models.run_config import RunConfig


def format_secs(value: float) -> str:
    """Seconds as typed: 5 -> '5', 0.0012345678 -> '0.0012345678'."""
    return f"{value:.15g}"


def describe_mode(config: RunConfig) -> str:
    pid = config.pid
    duration = format_secs(config.duration)
    if config.mode == SampleMode.PROFILE:
        return (f"Watching PID {pid} page references grow, profile beginning with "
                f"{duration} seconds, {config.profile_steps} steps...")
    if config.mode == SampleMode.CUMULATIVE:
        return f"Watching PID {pid} page references grow, output every {duration} seconds..."
    if config.mode == SampleMode.SNAPSHOT:
        if config.pause == 0:
            return f"Watching PID {pid} page references for every {duration} seconds..."
        return (f"Watching PID {pid} page references for {duration} seconds, "
                f"repeating after {format_secs(config.pause)} second pauses...")
    return f"Watching PID {pid} page references during {duration} seconds..."


def column_header(config: RunConfig) -> str:
    prefix = "%-8s " % "Dur(s)" if config.mode == SampleMode.PROFILE else ""
    return prefix + "%10s %10s %10s" % ("RSS(MB)", "PSS(MB)", "Ref(MB)")


def format_sample(sample: MemorySample, step_duration: Optional[float] = None) -> str:
    """One output row; step_duration is only given in profile mode."""
    prefix = "%-8.3f " % step_duration if step_duration is not None else ""
    return prefix + "%10.2f %10.2f %10.2f" % (sample.rss_mb, sample.pss_mb, sample.referenced_mb)
