"""
Relationship domain models

Associates contributions with the targets (URL, thread, channel) they were
posted to. A contribution may be related to zero, one or many targets.
"""
from dataclasses import dataclass
from typing import Union

from .contribution import Contribution
from .types import ContributionTargetID


@dataclass(frozen=True)
class ContributionTarget:
    """Opaque anchor a contribution is posted against"""
    target_id: ContributionTargetID


@dataclass(frozen=True)
class ContributionTargetRelationship:
    """
    Link between a Contribution and a ContributionTarget

    Append-only record: saving the same pair twice keeps both.
    """
    contribution: Contribution
    target: ContributionTarget

    @property
    def contribution_id(self) -> str:
        return self.contribution.id

    @property
    def target_id(self) -> ContributionTargetID:
        return self.target.target_id


# What the interaction facade accepts for posting
PostedContribution = Union[Contribution, ContributionTargetRelationship]
