"""
Party domain models
"""
from dataclasses import dataclass
from typing import Optional

from .types import PartyID


@dataclass(frozen=True)
class Party:
    """
    A participant in a contribution session.

    Parties are referenced by sessions, never versioned by the stores.
    """
    party_id: PartyID


@dataclass(frozen=True)
class Person(Party):
    """A human participant"""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    profile_picture: Optional[str] = None  # URL

    @property
    def display_name(self) -> Optional[str]:
        """First and last name joined, or None if neither is known"""
        parts = [p for p in (self.first_name, self.last_name) if p]
        return " ".join(parts) if parts else None


@dataclass(frozen=True)
class Organization(Party):
    """An organization participant"""
    name: str
