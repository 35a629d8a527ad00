# procsentry

procsentry checks the processes running on a machine against a watch list
kept in a CSV file. When a running process's executable path appears in the
list, the executable is hashed with SHA-256 and reported:

- **suspicious** when the path matches but the hash differs from the listed one
  (or the row lists no hash);
- **malicious** when both the path and the hash match.

Processes whose paths are not in the list are left alone, and no file is hashed
unless its path matched first.

## Installation

```
pip install procsentry
```

For running the test suite:

```
pip install "procsentry[test]"
pytest
```

## The watch list

The watch list is a plain comma-separated file with one entry per line. One
column holds the key (the executable path); the remaining columns, in order,
are the process name and the expected SHA-256 of the executable:

```
evil.exe,C:\Tools\evil.exe,9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08
```

Here the path is in column 1, so the file is read with a key column index of 1.

How the file is read:

- fields are split on commas, with no quoting; a single trailing comma does not
  start a new field;
- a row whose key column is missing or empty is skipped;
- when two rows share a key, the later one wins;
- a file that cannot be opened reads as an empty list.

An empty watch list (including one that could not be opened) is rejected with a
`ValueError`.

## Command line

```
procsentry [CONFIG] [--key-column N] [--interval SECONDS] [--iterations N]
```

- `CONFIG` – path of the watch list; defaults to `C:\anti-virus\input.csv`.
- `--key-column` – index of the column holding the executable path; default `1`.
- `--interval` – seconds to wait between scans; default `10`.
- `--iterations` – number of scans to run; by default it runs until interrupted.

Each scan prints one line per detection, for example:

```
Detection - Path:C:\Tools\evil.exe, Type:malicious, Time:05-03-2024 14:07:31, Instances:2
```

A bad watch list is printed as `bad input error: ...`, any other failure as
`Unexpected error: ...`; in both cases the command exits with status 1. After
the requested number of scans it exits with status 0.

## Library use

```python
from procsentry.antivirus import Antivirus
from procsentry.proc_utils import get_running_processes

scanner = Antivirus("watchlist.csv", 1)
detections = scanner.scan_running_processes(get_running_processes())

for sha256, detection in detections.items():
    print(sha256, detection.to_print())
```

`Antivirus(config_path, key_column_idx=0)` loads the watch list.
`scan_running_processes(processes=None)` scans the given `ProcessDescriptor`
records, or the live process list when none are given, and returns a dictionary
keyed by the SHA-256 of each matching executable, sorted by that key. Processes
with no known path are skipped. Each value is a `Detection` with:

- `file_path` – the executable path;
- `instances` – how many matching processes had that image;
- `type` – a `DetectionType` (`CLEAN`, `SUSPICIOUS` or `MALICIOUS`, whose string
  forms are `clean`, `suspicious` and `malicious`);
- `time_tag` – a `datetime` of when it was last recorded.

`Detection.to_print()` renders the one-line form shown above, with the time in
local time as `DD-MM-YYYY HH:MM:SS`.

The building blocks are available on their own as well:

- `procsentry.csv_utils.read_csv(file_path, key_column_idx=0)` reads a watch
  list into a dictionary from key to the other columns of its row;
- `procsentry.hash_utils.get_sha256(file_path)` returns the lowercase hex SHA-256
  of a file, or the hash of no data when the file cannot be opened;
- `procsentry.proc_utils.get_running_processes()` lists the running processes as
  `ProcessDescriptor` records with `name`, `path` (a `Path`, or `None` when the
  executable is unknown) and `pid`, skipping those that cannot be inspected.

## What it does not do

procsentry only reports. It does not terminate, suspend or quarantine
processes, does not delete or move files, and keeps no record of detections
beyond what it prints.