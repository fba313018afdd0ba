"""Building blocks for a tus resumable upload server: extensions, checksums, headers and file storage."""

__version__ = "0.1.0"

__all__ = ["core", "creation", "dir_struct", "extensions", "hashes", "headers", "storage"]