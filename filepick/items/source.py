# items/source.py

import subprocess
from pathlib import Path
from typing import Iterable, List, Optional, Protocol

from ..errors import ItemSourceError

class ItemSource(Protocol):
    """Anything that can produce the ordered list of raw items."""
    def items(self) -> List[str]: ...

def run(cmd, cwd=None, check=True):
    """Run a command and return its stripped stdout."""
    result = subprocess.run(cmd, text=True, capture_output=True, cwd=cwd)
    if check and result.returncode != 0:
        raise subprocess.CalledProcessError(
            returncode=result.returncode,
            cmd=cmd,
            output=result.stdout,
            stderr=result.stderr,
        )
    return result.stdout.strip()

class GitItemSource:
    """Files tracked by the git repository containing `path`."""

    def __init__(self, path: Optional[str] = None, logger=None):
        self.path = path
        self.logger = logger

    def root_dir(self) -> str:
        return run(["git", "rev-parse", "--show-toplevel"], cwd=self.path)

    def items(self) -> List[str]:
        try:
            root = self.root_dir()
            listing = run(["git", "ls-files"], cwd=root)
        except FileNotFoundError as e:
            raise ItemSourceError(f"git is not available: {e}") from e
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or "").strip() or f"exit status {e.returncode}"
            raise ItemSourceError(f"Unable to list tracked files: {detail}") from e
        files = [line for line in listing.splitlines() if line]
        if self.logger:
            self.logger.debug(f"git ls-files returned {len(files)} files under {root}")
        return files

class FileItemSource:
    """One item per non-blank line of a text file."""

    def __init__(self, path: str):
        self.path = Path(path)

    def items(self) -> List[str]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ItemSourceError(f"Unable to read items from {self.path}: {e}") from e
        return [line.strip() for line in text.splitlines() if line.strip()]

class StaticItemSource:
    """Items supplied up front."""

    def __init__(self, items: Iterable[str]):
        self._items = list(items)

    def items(self) -> List[str]:
        return list(self._items)
