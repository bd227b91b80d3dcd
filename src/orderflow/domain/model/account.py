"""Customer account referenced by orders (read-only here)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Account:

    id: int
    full_name: str
    email: str = ""
    active: bool = True
