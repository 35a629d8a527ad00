"""Listing the processes running on this machine."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import psutil


@dataclass(frozen=True)
class ProcessDescriptor:
    """A running process and the image file it was started from."""

    name: str
    path: Optional[Path]
    pid: int


def get_running_processes() -> List[ProcessDescriptor]:
    """Return the processes that can be queried; inaccessible ones are skipped."""
    result: List[ProcessDescriptor] = []
    for proc in psutil.process_iter():
        try:
            name = proc.name()
            exe = proc.exe()
        except psutil.Error:
            continue
        result.append(
            ProcessDescriptor(name=name, path=Path(exe) if exe else None, pid=proc.pid)
        )
    return result