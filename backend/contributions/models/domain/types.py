"""
Identifier types

All identifiers are opaque strings. The aliases only document intent.
"""

PartyID = str
ContributionSessionID = str
ContributionID = str
ContributionTargetID = str
