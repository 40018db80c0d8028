"""UserIdentity: caller-supplied identity (not verified here)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class UserIdentity:
    """Identity passed by the upstream API layer with every engine call."""

    user_id: str
    email: Optional[str] = None
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.user_id or not self.user_id.strip():
            raise ValueError("user_id must be non-empty")
