"""
Document storage for feature docs.

Operations never touch the file system directly. They go through a
DocumentStore so tests can run against MemoryDocumentStore.
"""

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class DocumentStore(Protocol):
    """Minimal text-document storage interface."""

    def exists(self, path: Path) -> bool: ...

    def is_dir(self, path: Path) -> bool: ...

    def read(self, path: Path) -> str: ...

    def write(self, path: Path, content: str) -> None: ...

    def append(self, path: Path, content: str) -> None: ...


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def _target_mode(path: Path) -> int:
    """Mode for a rewritten file: the existing one, else 0666 minus umask."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        return 0o666 & ~_current_umask()


class FileDocumentStore:
    """DocumentStore backed by the local file system.

    write() goes through a temp file in the same directory followed by
    os.replace, so an interrupted rewrite leaves the original intact.
    The replacement keeps the existing file's mode; new files get the
    umask default, as a plain open() would.
    """

    encoding = "utf-8"

    def exists(self, path: Path) -> bool:
        return Path(path).is_file()

    def is_dir(self, path: Path) -> bool:
        return Path(path).is_dir()

    def read(self, path: Path) -> str:
        return Path(path).read_text(encoding=self.encoding)

    def write(self, path: Path, content: str) -> None:
        path = Path(path)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding=self.encoding) as f:
                f.write(content)
            os.chmod(tmp_name, _target_mode(path))
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"Wrote {path} ({len(content)} chars)")

    def append(self, path: Path, content: str) -> None:
        with open(path, "a", encoding=self.encoding) as f:
            f.write(content)
        logger.debug(f"Appended {len(content)} chars to {path}")


class MemoryDocumentStore:
    """In-memory DocumentStore for tests and dry runs."""

    def __init__(self, files: dict | None = None, dirs: list | None = None):
        self.files: dict[Path, str] = {}
        self.dirs: set[Path] = set()
        for d in dirs or []:
            self.mkdir(Path(d))
        for path, content in (files or {}).items():
            self.files[Path(path)] = content
            self.mkdir(Path(path).parent)

    def mkdir(self, path: Path) -> None:
        path = Path(path)
        self.dirs.add(path)
        self.dirs.update(path.parents)

    def exists(self, path: Path) -> bool:
        return Path(path) in self.files

    def is_dir(self, path: Path) -> bool:
        return Path(path) in self.dirs

    def read(self, path: Path) -> str:
        try:
            return self.files[Path(path)]
        except KeyError:
            raise FileNotFoundError(f"No such document: {path}") from None

    def write(self, path: Path, content: str) -> None:
        path = Path(path)
        if path.parent not in self.dirs:
            raise FileNotFoundError(f"No such directory: {path.parent}")
        self.files[path] = content

    def append(self, path: Path, content: str) -> None:
        path = Path(path)
        if path.parent not in self.dirs:
            raise FileNotFoundError(f"No such directory: {path.parent}")
        self.files[path] = self.files.get(path, "") + content
