from __future__ import annotations

from dataclasses import dataclass, field

from .members.model import Member
from .operations.model import Operation


@dataclass
class BrigadeState:
    """Top-level application state: the roster and the operations log.

    Both lists are mutated only through the in-memory repositories; reports
    and summaries are derived from them on every call.
    """

    members: list[Member] = field(default_factory=list)
    operations: list[Operation] = field(default_factory=list)
