from dataclasses import dataclass


@dataclass(frozen=True)
class ElapsedTimeSampled:
    elapsed: float
    timestamp: float
