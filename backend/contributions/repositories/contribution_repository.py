"""
Contribution Repository - in-memory storage for contributions and reactions

Storage: process memory
- contributions: dict keyed by contribution ID (flat, parent_id links only)
- reactions: dict of lists keyed by contribution ID
- children: parent ID -> child IDs, kept in first-save order

Threads are rebuilt from the flat records on every get_thread call.
"""
import asyncio
import bisect
import logging
from typing import Dict, List, Optional, Union

from ..config.settings import ThreadStrategy
from ..models.domain import (
    Contribution,
    ContributionID,
    ContributionReaction,
    ContributionWithReactions,
    HierarchicalContribution,
)
from .base import ContributionRepository

logger = logging.getLogger(__name__)


class InMemoryContributionRepository(ContributionRepository):
    """
    Repository for Contribution and ContributionReaction domain models

    Thread reconstruction strategies (identical output):
    - SCAN: scan every stored contribution for the children of each node
    - INDEX: look children up in the parent -> children index

    save_reaction applies all given reactions under one lock acquisition,
    so a multi-reaction save is never partially visible.
    """

    def __init__(self, thread_strategy: ThreadStrategy = ThreadStrategy.SCAN):
        """
        Args:
            thread_strategy: How children are found while rebuilding a thread
        """
        self.thread_strategy = ThreadStrategy(thread_strategy)

        self._contributions: Dict[ContributionID, Contribution] = {}
        self._reactions: Dict[ContributionID, List[ContributionReaction]] = {}

        # Parent -> children index, ordered like self._contributions
        self._children: Dict[ContributionID, List[ContributionID]] = {}
        self._positions: Dict[ContributionID, int] = {}

        self._lock = asyncio.Lock()

    # =========================================================================
    # WRITE OPERATIONS
    # =========================================================================

    async def save_contribution(self, contribution: Contribution) -> Contribution:
        """
        Save (upsert) a contribution.

        Saving an existing ID overwrites it silently; there is no
        optimistic-concurrency check.

        Args:
            contribution: Contribution (derived fields are stripped)

        Returns:
            The stored flat contribution
        """
        flat = contribution.to_flat()

        async with self._lock:
            previous = self._contributions.get(flat.id)
            self._contributions[flat.id] = flat
            self._index(flat, previous)

        if previous is not None:
            logger.info(f"Overwrote contribution {flat.id}")
        else:
            logger.info(f"Saved contribution {flat.id} (parent: {flat.parent_id})")
        return flat

    async def save_reaction(self, *reactions: ContributionReaction) -> List[ContributionReaction]:
        """
        Append reactions, each under its contribution_id.

        The referenced contribution does not have to exist (yet).

        Returns:
            The given reactions
        """
        async with self._lock:
            for reaction in reactions:
                self._reactions.setdefault(reaction.contribution_id, []).append(reaction)

        for reaction in reactions:
            logger.info(f"Saved reaction {reaction.reaction_id} '{reaction.reaction}' on {reaction.contribution_id}")
        return list(reactions)

    def _index(self, contribution: Contribution, previous: Optional[Contribution]) -> None:
        """Keep the children index in step with self._contributions"""
        if previous is None:
            self._positions[contribution.id] = len(self._positions)
            if contribution.parent_id is not None:
                # Newest position always sorts last
                self._children.setdefault(contribution.parent_id, []).append(contribution.id)
            return

        if previous.parent_id == contribution.parent_id:
            return

        # Re-parented: move it, keeping its original position
        if previous.parent_id is not None:
            self._children[previous.parent_id].remove(contribution.id)
        if contribution.parent_id is not None:
            siblings = self._children.setdefault(contribution.parent_id, [])
            positions = [self._positions[s] for s in siblings]
            at = bisect.bisect(positions, self._positions[contribution.id])
            siblings.insert(at, contribution.id)

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    async def get_contribution(
        self,
        contribution_id: ContributionID,
        include_reactions: bool = False,
    ) -> Optional[Union[Contribution, ContributionWithReactions]]:
        """
        Retrieve contribution by ID.

        Args:
            contribution_id: Contribution ID
            include_reactions: Attach the reactions recorded for it

        Returns:
            Contribution, ContributionWithReactions (reactions is None if
            none were recorded) or None
        """
        async with self._lock:
            contribution = self._contributions.get(contribution_id)
            if contribution is None:
                logger.debug(f"Contribution {contribution_id} not found")
                return None

            if include_reactions:
                return ContributionWithReactions.from_contribution(
                    contribution, self._reactions_for(contribution_id)
                )
            return contribution

    async def get_thread(
        self,
        root_contribution_id: ContributionID,
        include_reactions: bool = False,
    ) -> Optional[HierarchicalContribution]:
        """
        Rebuild the thread rooted at a contribution.

        Depth-first; every descendant reachable through parent_id chains
        appears exactly once. Siblings are in first-save order. Replies
        whose parent does not exist are not part of any thread. A node
        already placed is never entered again, so parent_id cycles end.

        The tree is built while holding the lock: one consistent snapshot
        per call.

        Args:
            root_contribution_id: ID of the thread root
            include_reactions: Attach reactions to every node

        Returns:
            Fully populated HierarchicalContribution or None
        """
        async with self._lock:
            thread = self._build_thread(root_contribution_id, include_reactions)

        if thread is None:
            logger.debug(f"Thread root {root_contribution_id} not found")
        else:
            logger.debug(f"Rebuilt thread {root_contribution_id} ({self.thread_strategy.value})")
        return thread

    async def count(self) -> int:
        """Number of stored contributions"""
        async with self._lock:
            return len(self._contributions)

    def _build_thread(
        self,
        root_id: ContributionID,
        include_reactions: bool,
    ) -> Optional[HierarchicalContribution]:
        root = self._contributions.get(root_id)
        if root is None:
            return None

        root_node = self._node(root, include_reactions)
        placed = {root.id}
        pending = [root_node]

        # Iterative so long reply chains cannot hit the recursion limit
        while pending:
            node = pending.pop()
            for child in self._children_of(node.id):
                if child.id in placed:
                    logger.warning(f"parent_id cycle in thread {root_id}: {child.id} already placed")
                    continue
                placed.add(child.id)
                child_node = self._node(child, include_reactions)
                node.sub_contributions.append(child_node)
                pending.append(child_node)

        return root_node

    def _node(self, contribution: Contribution, include_reactions: bool) -> HierarchicalContribution:
        reactions = self._reactions_for(contribution.id) if include_reactions else None
        return HierarchicalContribution.from_contribution(contribution, reactions)

    def _children_of(self, parent_id: ContributionID) -> List[Contribution]:
        if self.thread_strategy == ThreadStrategy.INDEX:
            return [self._contributions[c] for c in self._children.get(parent_id, ())]
        return [c for c in self._contributions.values() if c.parent_id == parent_id]

    def _reactions_for(self, contribution_id: ContributionID) -> Optional[List[ContributionReaction]]:
        reactions = self._reactions.get(contribution_id)
        return list(reactions) if reactions is not None else None

    async def close(self) -> None:
        """Drop all contributions and reactions"""
        async with self._lock:
            self._contributions.clear()
            self._reactions.clear()
            self._children.clear()
            self._positions.clear()
