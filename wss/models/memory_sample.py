from dataclasses import dataclass

# smaps reports sizes in kibibytes; output is in mebibytes.
KB_PER_MB = 1024


@dataclass
class MemorySample:
    """Totals of one smaps read, summed over every mapping (kB)"""
    rss_kb: int = 0
    pss_kb: int = 0
    referenced_kb: int = 0

    @property
    def rss_mb(self) -> float:
        return self.rss_kb / KB_PER_MB

    @property
    def pss_mb(self) -> float:
        return self.pss_kb / KB_PER_MB

    @property
    def referenced_mb(self) -> float:
        return self.referenced_kb / KB_PER_MB
