from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Application account (not a brigade member)."""

    username: str
    full_name: str
    password_hash: str
