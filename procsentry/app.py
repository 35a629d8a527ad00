"""Command that periodically scans running processes and prints detections."""

from __future__ import annotations

import argparse
import time
from typing import Optional, Sequence

from procsentry.antivirus import Antivirus

DEFAULT_CONFIG_PATH = "C:\\anti-virus\\input.csv"
DEFAULT_KEY_COLUMN = 1  # the key column is the image path
DEFAULT_INTERVAL = 10.0


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="procsentry",
        description="Report running processes whose image is on a watch list.",
    )
    parser.add_argument("config", nargs="?", default=DEFAULT_CONFIG_PATH)
    parser.add_argument("--key-column", type=int, default=DEFAULT_KEY_COLUMN)
    parser.add_argument(
        "--interval", type=float, default=DEFAULT_INTERVAL, help="seconds between scans"
    )
    parser.add_argument(
        "--iterations", type=int, default=None, help="number of scans; default runs forever"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the scanner; return 0 on a normal end and 1 on an error."""
    args = _parse_args(argv)
    try:
        av = Antivirus(args.config, args.key_column)
        done = 0
        while args.iterations is None or done < args.iterations:
            for detection in av.scan_running_processes().values():
                print(detection.to_print(), flush=True)
            done += 1
            if args.iterations is None or done < args.iterations:
                time.sleep(args.interval)
    except ValueError as exc:
        print(f"bad input error: {exc}", flush=True)
        return 1
    except Exception as exc:  # noqa: BLE001 - top-level report
        print(f"Unexpected error: {exc}", flush=True)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())