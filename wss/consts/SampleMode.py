from enum import Enum


class SampleMode(Enum):
    SINGLE = "single"
    CUMULATIVE = "cumulative"
    SNAPSHOT = "snapshot"
    PROFILE = "profile"
