"""Ordered collection of archive members with position-based editing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .member import Member

__all__ = ["MemberList"]


class MemberList:
    """Members of an archive in their stored order.

    Positions start at 0. A position that is negative or past the end means
    the last member for :meth:`insert` and :meth:`remove`.
    """

    def __init__(self, members: Iterable[Member] | None = None) -> None:
        self._members: list[Member] = list(members) if members is not None else []

    def insert(self, member: Member, pos: int = -1) -> int:
        """Insert ``member`` at ``pos``, or at the end; return the new length."""
        if 0 <= pos < len(self._members):
            self._members.insert(pos, member)
        else:
            self._members.append(member)
        return len(self._members)

    def remove(self, pos: int = -1) -> Member:
        """Take out and return the member at ``pos``, or the last one."""
        if not self._members:
            raise IndexError("remove from an empty member list")
        if not 0 <= pos < len(self._members):
            pos = len(self._members) - 1
        return self._members.pop(pos)

    def get(self, pos: int = -1) -> Member:
        """Return the member at ``pos`` without removing it; negative means the last."""
        if not self._members:
            raise IndexError("get from an empty member list")
        if pos >= len(self._members):
            raise IndexError(f"position {pos} past the end of {len(self._members)} members")
        if pos < 0:
            return self._members[-1]
        return self._members[pos]

    def find(self, member: Member) -> int:
        """Position of ``member`` itself (not an equal copy), or -1 if absent."""
        return next(
            (index for index, candidate in enumerate(self._members) if candidate is member),
            -1,
        )

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Member]:
        return iter(self._members)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._members!r})"

    def format(self) -> str:
        """The members' user ids from first to last, separated by single spaces."""
        return " ".join(str(member.uid) for member in self._members)