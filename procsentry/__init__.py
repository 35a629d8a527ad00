"""Flag running processes whose executables match a CSV watch list by path and SHA-256."""

__version__ = "0.1.0"

__all__ = ["antivirus", "app", "csv_utils", "detection", "hash_utils", "proc_utils"]