"""
Contribution services
"""
from .interaction import TypicalContributionInteraction

__all__ = ['TypicalContributionInteraction']
