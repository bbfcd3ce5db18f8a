"""
TypicalContributionInteraction - business logic over the three stores.

Application code depends on this facade, not on the repositories:
- post_contribution(payload) -> contribution store or relationship store
- post_reaction(*reactions)  -> contribution store
- get_contribution / get_thread -> contribution store
- render_contribution / render_thread -> presentation formatter

No caching: every call goes to the backing store.
"""
import logging
from typing import List, Optional, Union

from ..config.settings import Settings, get_settings
from ..models.domain import (
    Contribution,
    ContributionID,
    ContributionReaction,
    ContributionTargetRelationship,
    ContributionWithReactions,
    HierarchicalContribution,
    PostedContribution,
)
from ..presentation import formatter
from ..repositories import (
    ContributionRepository,
    ContributionSessionRepository,
    ContributionTargetRelationshipRepository,
    InMemoryContributionRepository,
    InMemoryContributionSessionRepository,
    InMemoryContributionTargetRelationshipRepository,
)

logger = logging.getLogger(__name__)


class TypicalContributionInteraction:
    """
    Interaction and presentation strategy over pluggable stores.

    Any store not passed in is an in-memory one built from settings.
    """

    def __init__(
        self,
        sessions: Optional[ContributionSessionRepository] = None,
        contributions: Optional[ContributionRepository] = None,
        relationships: Optional[ContributionTargetRelationshipRepository] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Args:
            sessions: Session store
            contributions: Contribution and reaction store
            relationships: Contribution/target relationship store
            settings: Used only to build default in-memory stores
        """
        settings = settings or get_settings()

        self.sessions = sessions or InMemoryContributionSessionRepository(
            session_id_size=settings.session_id_size
        )
        self.contributions = contributions or InMemoryContributionRepository(
            thread_strategy=settings.thread_strategy
        )
        self.relationships = relationships or InMemoryContributionTargetRelationshipRepository()

    # =========================================================================
    # INTERACTION
    # =========================================================================

    async def post_contribution(self, payload: PostedContribution) -> PostedContribution:
        """
        Post a contribution, or relate a contribution to a target.

        Args:
            payload: Contribution or ContributionTargetRelationship

        Returns:
            What the store saved

        Raises:
            TypeError: If payload is neither variant
        """
        if isinstance(payload, ContributionTargetRelationship):
            return await self.relationships.save_relationship(payload)
        elif isinstance(payload, Contribution):
            return await self.contributions.save_contribution(payload)
        else:
            raise TypeError(f"Cannot post {type(payload).__name__}: expected Contribution or ContributionTargetRelationship")

    async def post_reaction(self, *reactions: ContributionReaction) -> List[ContributionReaction]:
        """React to one or more contributions"""
        await self.contributions.save_reaction(*reactions)
        return list(reactions)

    async def get_contribution(
        self,
        contribution_id: ContributionID,
        include_reactions: bool = False,
    ) -> Optional[Union[Contribution, ContributionWithReactions]]:
        return await self.contributions.get_contribution(contribution_id, include_reactions=include_reactions)

    async def get_thread(
        self,
        root_contribution_id: ContributionID,
        include_reactions: bool = False,
    ) -> Optional[HierarchicalContribution]:
        return await self.contributions.get_thread(root_contribution_id, include_reactions=include_reactions)

    # =========================================================================
    # PRESENTATION
    # =========================================================================

    def render_contribution(self, contribution: Contribution) -> str:
        return formatter.render_contribution(contribution)

    def render_thread(self, thread: HierarchicalContribution) -> str:
        return formatter.render_thread(thread)

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    async def close(self) -> None:
        """Tear down all three stores"""
        await self.sessions.close()
        await self.contributions.close()
        await self.relationships.close()
        logger.info("Closed contribution stores")
