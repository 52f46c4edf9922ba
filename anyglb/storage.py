"""
File storage capability used by the pipeline

The pipeline never touches the filesystem directly: it reads and writes
through a Storage, so tests (or browsers, or object stores) can swap in
their own.
"""

from pathlib import Path
from typing import Callable, Optional, Protocol

ReadFile = Callable[[str], bytes]
WriteFile = Callable[[str, bytes], None]


class Storage(Protocol):
    """Fetch bytes by path, store bytes by path"""

    def read(self, path: str) -> bytes:
        ...

    def write(self, path: str, data: bytes) -> None:
        ...


class LocalStorage:
    """Storage backed by the local filesystem"""

    def read(self, path: str) -> bytes:
        return Path(path).read_bytes()

    def write(self, path: str, data: bytes) -> None:
        Path(path).write_bytes(data)


class CallableStorage:
    """
    Adapts plain read/write functions to the Storage interface.

    Either function may be None, in which case the local filesystem is used
    for that direction.
    """

    def __init__(self, read_file: Optional[ReadFile] = None, write_file: Optional[WriteFile] = None):
        local = LocalStorage()
        self._read = read_file or local.read
        self._write = write_file or local.write

    def read(self, path: str) -> bytes:
        return self._read(path)

    def write(self, path: str, data: bytes) -> None:
        self._write(path, data)
