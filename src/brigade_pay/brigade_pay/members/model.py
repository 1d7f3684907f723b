from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Member:
    """Domain entity: a brigade member (strażak).

    Note: plain data object, no storage access.
    """

    member_id: str
    name: str
    rank: str
