"""
Contribution Target Relationship Repository - in-memory storage

Storage: process memory, append-only, indexed by target ID and by
contribution ID.
"""
import asyncio
import logging
from typing import Dict, List

from ..models.domain import (
    ContributionID,
    ContributionTargetID,
    ContributionTargetRelationship,
)
from .base import ContributionTargetRelationshipRepository

logger = logging.getLogger(__name__)


class InMemoryContributionTargetRelationshipRepository(ContributionTargetRelationshipRepository):
    """
    Repository for ContributionTargetRelationship domain model

    Duplicates are kept: saving the same (contribution, target) pair twice
    makes both lookups return it twice.
    """

    def __init__(self):
        self._by_target: Dict[ContributionTargetID, List[ContributionTargetRelationship]] = {}
        self._by_contribution: Dict[ContributionID, List[ContributionTargetRelationship]] = {}
        self._lock = asyncio.Lock()

    async def save_relationship(
        self,
        relationship: ContributionTargetRelationship,
    ) -> ContributionTargetRelationship:
        """
        Append a relationship.

        Returns:
            The given relationship
        """
        async with self._lock:
            self._by_target.setdefault(relationship.target_id, []).append(relationship)
            self._by_contribution.setdefault(relationship.contribution_id, []).append(relationship)

        logger.info(f"Related contribution {relationship.contribution_id} to target {relationship.target_id}")
        return relationship

    async def get_relationships_by_target_id(
        self,
        target_id: ContributionTargetID,
    ) -> List[ContributionTargetRelationship]:
        """
        Get all relationships for a target.

        Returns:
            List of relationships in save order (empty if none)
        """
        async with self._lock:
            return list(self._by_target.get(target_id, ()))

    async def get_relationships_by_contribution_id(
        self,
        contribution_id: ContributionID,
    ) -> List[ContributionTargetRelationship]:
        """
        Get all relationships for a contribution.

        Returns:
            List of relationships in save order (empty if none)
        """
        async with self._lock:
            return list(self._by_contribution.get(contribution_id, ()))

    async def close(self) -> None:
        """Drop all relationships"""
        async with self._lock:
            self._by_target.clear()
            self._by_contribution.clear()
