"""Matching running processes against a watch list of known images."""

from __future__ import annotations

import os
from datetime import datetime
from typing import Dict, Iterable, Optional, Union

from procsentry.csv_utils import ConfigurationMap, read_csv
from procsentry.detection import Detection, DetectionType
from procsentry.hash_utils import get_sha256
from procsentry.proc_utils import ProcessDescriptor, get_running_processes

# Positions of the remaining columns once the key column is removed.
_PROC_NAME_IDX = 0
_SHA256_IDX = 1


class Antivirus:
    """Scans running processes whose image path appears in the configuration."""

    def __init__(
        self, config_path: Union[str, os.PathLike], key_column_idx: int = 0
    ) -> None:
        config = read_csv(config_path, key_column_idx)
        if not self._is_valid(config):
            raise ValueError(
                "Failed to load configuration file, configuration is invalid"
            )
        self._config: ConfigurationMap = config

    @staticmethod
    def _is_valid(config: ConfigurationMap) -> bool:
        return len(config) > 0

    def scan_running_processes(
        self, processes: Optional[Iterable[ProcessDescriptor]] = None
    ) -> Dict[str, Detection]:
        """Return detections keyed by image SHA-256, in key order.

        Processes whose path is listed are suspicious; those whose image also
        has the listed hash are malicious.
        """
        if processes is None:
            processes = get_running_processes()

        detections: Dict[str, Detection] = {}
        for proc in processes:
            if proc.path is None:
                continue
            file_path = str(proc.path)
            row = self._config.get(file_path)
            if row is None:
                continue
            expected_sha = row[_SHA256_IDX] if len(row) > _SHA256_IDX else None

            # Hash only on a path match, to avoid needless work.
            image_sha = get_sha256(proc.path)

            detection = detections.setdefault(image_sha, Detection(file_path=file_path))
            detection.file_path = file_path
            detection.instances += 1
            detection.time_tag = datetime.now()
            detection.type = (
                DetectionType.MALICIOUS
                if image_sha == expected_sha
                else DetectionType.SUSPICIOUS
            )

        return dict(sorted(detections.items()))