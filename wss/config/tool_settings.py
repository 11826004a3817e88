from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class ToolSettings:
    """Where and how the tool runs. Measurement parameters come from the CLI."""
    proc_root: Path = Path("/proc")
    log_level: str = "WARNING"
    log_file: Optional[Path] = None
    check_target: bool = True
