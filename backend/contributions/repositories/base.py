"""
Repository interfaces

Every storage backend for contributions implements these three
interfaces. The interaction facade depends only on them, so an in-memory
store, a key/value store or a relational database are interchangeable.

Backend errors (I/O, serialization) propagate unchanged to the caller.
Multi-item writes (save_reaction with several reactions) are not rolled
back on partial failure; each backend documents which subset is applied.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Union

from ..models.domain import (
    Contribution,
    ContributionID,
    ContributionReaction,
    ContributionSession,
    ContributionSessionAuth,
    ContributionSessionID,
    ContributionTargetID,
    ContributionTargetRelationship,
    ContributionWithReactions,
    HierarchicalContribution,
    Organization,
    Person,
    UserAgent,
)


class ContributionSessionRepository(ABC):
    """Creates, looks up and times out authenticated contribution sessions"""

    @abstractmethod
    async def create_session(
        self,
        auth: ContributionSessionAuth,
        user_agent: UserAgent,
        person: Optional[Person] = None,
        organization: Optional[Organization] = None,
    ) -> ContributionSession:
        """
        Create and persist a session with a fresh random ID.

        Raises:
            InvalidInputError: If the configured ID size is invalid
        """

    @abstractmethod
    async def get_session(self, session_id: ContributionSessionID) -> Optional[ContributionSession]:
        """Return the session or None. No side effects."""

    @abstractmethod
    async def timeout_session(self, session: ContributionSession) -> ContributionSession:
        """Remove the session and return it. Timing out twice is not an error."""

    async def close(self) -> None:
        """Release backend resources"""


class ContributionRepository(ABC):
    """Persists flat contributions and reactions, rebuilds threads on read"""

    @abstractmethod
    async def save_contribution(self, contribution: Contribution) -> Contribution:
        """Upsert by ID. Last write wins."""

    @abstractmethod
    async def save_reaction(self, *reactions: ContributionReaction) -> List[ContributionReaction]:
        """Append reactions under their contribution_id (which need not exist yet)."""

    @abstractmethod
    async def get_contribution(
        self,
        contribution_id: ContributionID,
        include_reactions: bool = False,
    ) -> Optional[Union[Contribution, ContributionWithReactions]]:
        """Return the contribution, with reactions attached if asked, or None."""

    @abstractmethod
    async def get_thread(
        self,
        root_contribution_id: ContributionID,
        include_reactions: bool = False,
    ) -> Optional[HierarchicalContribution]:
        """
        Rebuild the thread rooted at root_contribution_id.

        Returns None if the root does not exist. Every descendant reachable
        through parent_id chains appears exactly once, depth-first.
        """

    async def close(self) -> None:
        """Release backend resources"""


class ContributionTargetRelationshipRepository(ABC):
    """Indexes which contributions were posted to which targets"""

    @abstractmethod
    async def save_relationship(
        self,
        relationship: ContributionTargetRelationship,
    ) -> ContributionTargetRelationship:
        """Append the relationship. Duplicates are kept."""

    @abstractmethod
    async def get_relationships_by_target_id(
        self,
        target_id: ContributionTargetID,
    ) -> List[ContributionTargetRelationship]:
        """All relationships for the target; empty list if none."""

    @abstractmethod
    async def get_relationships_by_contribution_id(
        self,
        contribution_id: ContributionID,
    ) -> List[ContributionTargetRelationship]:
        """All relationships for the contribution; empty list if none."""

    async def close(self) -> None:
        """Release backend resources"""
