"""Init-file resolver — PROJ "<code> +params <>" definition files.

An init file is named after its authority in lower case (epsg, esri,
world, nad83, nad27) and holds one definition per entry:

    # NAD83 / BC Albers
    <3005> +proj=aea +lat_1=50 +lat_2=58.5 +lat_0=45 +lon_0=-126
           +x_0=1000000 +y_0=0 +ellps=GRS80 +units=m +no_defs <>

Entries may span several lines; "#" starts a comment.
"""

from __future__ import annotations

import logging
import os
import re
import threading
from pathlib import Path

from pykoord.resolvers.base import NameResolver, split_name

logger = logging.getLogger(__name__)

# Bundled definitions shipped with the package
DATA_DIR = Path(__file__).resolve().parent.parent / "data"

# Extra directories, os.pathsep-separated, searched before DATA_DIR
ENV_INIT_PATH = "PYKOORD_INIT_PATH"

_ENTRY_PATTERN = re.compile(r"<(?P<code>[^<>\s]+)>(?P<params>.*?)<>", re.DOTALL)
_AUTHORITY_PATTERN = re.compile(r"[A-Za-z0-9_]+")


def read_init_file(path: str | Path) -> dict[str, str]:
    """Read an init file into a dict of code → parameter string.

    Args:
        path: Path to the init file.

    Returns:
        Definitions in file order, parameters normalized to single spaces.
    """
    text = Path(path).read_text(encoding="utf-8", errors="replace")
    body = "\n".join(line.split("#", 1)[0] for line in text.splitlines())
    return {
        m.group("code"): " ".join(m.group("params").split())
        for m in _ENTRY_PATTERN.finditer(body)
    }


class InitFileResolver(NameResolver):
    """Resolve names from init files on a search path.

    Directories are searched in order: those passed to the constructor,
    then those listed in $PYKOORD_INIT_PATH, then the bundled data
    directory. When several directories define the same code, the
    earliest one wins. Files are read once and cached.

    Args:
        search_path: Extra directories to search first.
        use_env: Whether to honor $PYKOORD_INIT_PATH.
    """

    def __init__(
        self,
        search_path: list[str | Path] | None = None,
        use_env: bool = True,
    ) -> None:
        dirs = [Path(p) for p in (search_path or [])]
        if use_env:
            env = os.environ.get(ENV_INIT_PATH, "")
            dirs.extend(Path(p) for p in env.split(os.pathsep) if p)
        dirs.append(DATA_DIR)
        self.search_path: list[Path] = dirs
        self._cache: dict[str, dict[str, str]] = {}
        self._lock = threading.Lock()

    def _definitions(self, authority: str) -> dict[str, str]:
        filename = authority.lower()
        with self._lock:
            if filename in self._cache:
                return self._cache[filename]
            merged: dict[str, str] = {}
            for directory in reversed(self.search_path):
                path = directory / filename
                if path.is_file():
                    entries = read_init_file(path)
                    logger.debug("Loaded %d definitions from %s", len(entries), path)
                    merged.update(entries)
            self._cache[filename] = merged
            return merged

    def lookup(self, name: str) -> str | None:
        authority, code = split_name(name)
        if not _AUTHORITY_PATTERN.fullmatch(authority):
            return None
        return self._definitions(authority).get(code)

    @property
    def authorities(self) -> list[str]:
        """Authorities with an init file somewhere on the search path."""
        found: list[str] = []
        for directory in self.search_path:
            if not directory.is_dir():
                continue
            for path in sorted(directory.iterdir()):
                name = path.name.upper()
                if path.is_file() and _AUTHORITY_PATTERN.fullmatch(name) and name not in found:
                    found.append(name)
        return found

    def __repr__(self) -> str:
        dirs = ", ".join(str(d) for d in self.search_path)
        return f"InitFileResolver([{dirs}])"
