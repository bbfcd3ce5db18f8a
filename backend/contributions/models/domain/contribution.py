"""
Contribution domain models

Contributions are stored flat: parent_id is the only structural link.
HierarchicalContribution is a read-time view rebuilt on every thread fetch.
"""
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import List, Optional

from .session import ContributionSession
from .types import ContributionID


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ContributionReaction:
    """
    A lightweight response ("like", ...) to a contribution.

    reaction_id is unique per reaction and is not ordered with
    contribution IDs.
    """
    reaction_id: str
    contribution_id: ContributionID
    reaction: str
    session: ContributionSession
    timestamp: datetime = field(default_factory=_utcnow)


@dataclass(frozen=True)
class Contribution:
    """
    Contribution domain model - storage-agnostic representation

    One unit of user-generated content (comment, forum post, chat message).

    Threading: parent_id points at another contribution, or is None for a
    root. A contribution can never be its own ancestor.
    """
    id: ContributionID
    content: str
    session: ContributionSession

    # Threading support
    parent_id: Optional[ContributionID] = None

    # Set at creation, never mutated
    timestamp: datetime = field(default_factory=_utcnow)

    @property
    def is_reply(self) -> bool:
        """Check if this is a reply to another contribution"""
        return self.parent_id is not None

    @property
    def is_root(self) -> bool:
        """Check if this is a top-level contribution"""
        return self.parent_id is None

    def to_flat(self) -> 'Contribution':
        """Strip any derived fields (reactions, sub-contributions)"""
        if type(self) is Contribution:
            return self
        return Contribution(**_contribution_fields(self))


def _contribution_fields(contribution: Contribution) -> dict:
    return {f.name: getattr(contribution, f.name) for f in fields(Contribution)}


@dataclass(frozen=True)
class ContributionWithReactions(Contribution):
    """
    A contribution fetched with its reactions.

    reactions is None when no reaction was ever recorded for it.
    """
    reactions: Optional[List[ContributionReaction]] = None

    @classmethod
    def from_contribution(
        cls,
        contribution: Contribution,
        reactions: Optional[List[ContributionReaction]],
    ) -> 'ContributionWithReactions':
        return cls(**_contribution_fields(contribution), reactions=reactions)


@dataclass(frozen=True)
class HierarchicalContribution(Contribution):
    """
    A contribution with its replies nested below it.

    sub_contributions are in discovery order (store iteration order),
    not necessarily chronological. reactions is only populated when the
    thread was fetched with include_reactions.
    """
    sub_contributions: List['HierarchicalContribution'] = field(default_factory=list)
    reactions: Optional[List[ContributionReaction]] = None

    @classmethod
    def from_contribution(
        cls,
        contribution: Contribution,
        reactions: Optional[List[ContributionReaction]] = None,
    ) -> 'HierarchicalContribution':
        return cls(**_contribution_fields(contribution), reactions=reactions)

    def walk(self):
        """Yield this node and every descendant, depth-first"""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.sub_contributions))

    @property
    def size(self) -> int:
        """Number of contributions in the thread, root included"""
        return sum(1 for _ in self.walk())


ContributionThread = List[HierarchicalContribution]
