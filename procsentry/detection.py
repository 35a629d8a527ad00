"""Detection records produced by a process scan."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime

_TIME_FORMAT = "%d-%m-%Y %H:%M:%S"


class DetectionType(enum.Enum):
    """How dangerous a matched process image is considered."""

    CLEAN = "clean"
    SUSPICIOUS = "suspicious"
    MALICIOUS = "malicious"

    def __str__(self) -> str:
        return self.value


@dataclass
class Detection:
    """A process image that matched the configured watch list."""

    file_path: str
    instances: int = 0
    type: DetectionType = DetectionType.CLEAN
    time_tag: datetime = field(default_factory=datetime.now)

    def to_print(self) -> str:
        """Return a one-line human readable description, time in local time."""
        stamp = self.time_tag
        if stamp.tzinfo is not None:
            stamp = stamp.astimezone()
        return (
            f"Detection - Path:{self.file_path}"
            f", Type:{self.type}"
            f", Time:{stamp.strftime(_TIME_FORMAT)}"
            f", Instances:{self.instances}"
        )