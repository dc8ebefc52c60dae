"""Registry of file-type handlers keyed by file extension."""

from __future__ import annotations

import enum
import os
from typing import Any, BinaryIO, Callable, Dict, Optional

Loader = Callable[[str, int], Any]
Saver = Callable[[str, Any], Any]
Identifier = Callable[[BinaryIO], bool]


class LoaderFlag(enum.IntFlag):
    """Flags passed to loaders."""

    NONE = 0
    KEEP_BITMAP_FORMAT = 0x0002
    NO_PREMULTIPLIED_ALPHA = 0x0200
    KEEP_INDEX = 0x0800


class UnknownFileType(LookupError):
    """No handler is registered for a file type."""


def _normalise(ext: str) -> str:
    if not ext.startswith(".") or len(ext) < 2:
        raise ValueError(f"extension must start with a dot: {ext!r}")
    return ext.lower()


class FileTypeRegistry:
    """Loaders, savers and identifiers for file extensions."""

    def __init__(self) -> None:
        self._loaders: Dict[str, Loader] = {}
        self._savers: Dict[str, Saver] = {}
        self._identifiers: Dict[str, Identifier] = {}

    @staticmethod
    def _register(table: Dict[str, Any], ext: str, handler: Any) -> None:
        key = _normalise(ext)
        if handler is None:
            if key not in table:
                raise UnknownFileType(f"no handler registered for {key}")
            del table[key]
        else:
            table[key] = handler

    def register_loader(self, ext: str, loader: Optional[Loader]) -> None:
        """Register a loader for ``ext``; ``None`` removes it."""
        self._register(self._loaders, ext, loader)

    def register_saver(self, ext: str, saver: Optional[Saver]) -> None:
        """Register a saver for ``ext``; ``None`` removes it."""
        self._register(self._savers, ext, saver)

    def register_identifier(self, ext: str, identifier: Optional[Identifier]) -> None:
        """Register a content identifier for ``ext``; ``None`` removes it."""
        self._register(self._identifiers, ext, identifier)

    def identify(self, filename: str) -> Optional[str]:
        """Return the extension whose identifier accepts the file's content."""
        try:
            with open(filename, "rb") as fp:
                for ext, identifier in self._identifiers.items():
                    fp.seek(0)
                    if identifier(fp):
                        return ext
        except OSError:
            return None
        return None

    def load(self, filename: str, flags: int = 0) -> Any:
        """Load a file with the loader for its identified type or extension."""
        ext = self.identify(filename) or os.path.splitext(filename)[1].lower()
        loader = self._loaders.get(ext)
        if loader is None:
            raise UnknownFileType(f"no loader for {ext or filename!r}")
        return loader(filename, int(flags))

    def save(self, filename: str, item: Any) -> Any:
        """Save ``item`` with the saver for the file's extension."""
        ext = os.path.splitext(filename)[1].lower()
        saver = self._savers.get(ext)
        if saver is None:
            raise UnknownFileType(f"no saver for {ext or filename!r}")
        return saver(filename, item)