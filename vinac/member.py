"""Archive members: the metadata kept for each file stored in an archive."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

__all__ = ["MAX_NAME_LENGTH", "Member"]

MAX_NAME_LENGTH = 1023
"""Longest member name, in bytes of its UTF-8 encoding."""


@dataclass
class Member:
    """One file stored in an archive.

    ``original_size`` is the size of the file when it was added and
    ``current_size`` the size it takes inside the archive, which differs once
    the content is compressed. ``offset`` locates the content relative to the
    directory area.
    """

    name: str
    uid: int = 0
    original_size: int = 0
    current_size: int = 0
    mtime: float = 0.0
    offset: int = 0
    stat: os.stat_result | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.name.encode("utf-8")) > MAX_NAME_LENGTH:
            raise ValueError(
                f"member name longer than {MAX_NAME_LENGTH} bytes: {self.name[:40]!r}..."
            )

    @classmethod
    def from_path(cls, path: str | os.PathLike[str], offset: int = 0) -> Member:
        """Build a member from the file at ``path``, taking its metadata from stat."""
        info = os.stat(path)
        return cls(
            name=os.fspath(path),
            uid=info.st_uid,
            original_size=info.st_size,
            current_size=info.st_size,
            mtime=info.st_mtime,
            offset=offset,
            stat=info,
        )