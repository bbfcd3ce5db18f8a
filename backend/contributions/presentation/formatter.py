"""
Deterministic contribution formatter - for debugging and demos.

Formats a Contribution or a whole HierarchicalContribution thread into
plain text. Threads are listed depth-first, two spaces of indent per level:

    Contribution ID: root1
    Content: Root message
    root1 Subcontributions:
      Contribution ID: sub1
      Content: Sub message 1
"""

from collections import Counter
from typing import List, Optional

from ..models.domain import Contribution, ContributionReaction, HierarchicalContribution

INDENT = "  "


def render_contribution(contribution: Contribution) -> str:
    """Format a single contribution.

    Args:
        contribution: Any contribution (sub-contributions are ignored)

    Returns:
        "Contribution ID: ...\\n" followed by "Content: ...\\n" if it has content
    """
    rendered = f"Contribution ID: {contribution.id}\n"
    if contribution.content:
        rendered += f"Content: {contribution.content}\n"
    return rendered


def render_thread(thread: HierarchicalContribution) -> str:
    """Format a thread, root first, replies indented below their parent.

    Reactions are listed only for nodes fetched with include_reactions.
    """
    return "\n".join(_thread_lines(thread, 0))


def _thread_lines(node: HierarchicalContribution, level: int) -> List[str]:
    indent = INDENT * level
    lines = [f"{indent}Contribution ID: {node.id}"]

    if node.content:
        lines.append(f"{indent}Content: {node.content}")

    reactions = _format_reactions(node.reactions)
    if reactions:
        lines.append(f"{indent}Reactions: {reactions}")

    if node.sub_contributions:
        lines.append(f"{indent}{node.id} Subcontributions:")
        for sub in node.sub_contributions:
            lines.extend(_thread_lines(sub, level + 1))

    return lines


def _format_reactions(reactions: Optional[List[ContributionReaction]]) -> str:
    """'like x2, wow' in first-seen order"""
    if not reactions:
        return ""
    counts = Counter(r.reaction for r in reactions)
    return ", ".join(
        name if count == 1 else f"{name} x{count}"
        for name, count in counts.items()
    )
