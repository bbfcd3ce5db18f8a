#!/usr/bin/env python3
"""
Contribution demo - post a small thread against in-memory stores and print it.

Run: python -m contributions.demo [--strategy index] [--reactions]
"""
import argparse
import asyncio
import logging

from .config import Settings, ThreadStrategy, get_settings
from .models.domain import (
    ApiTokenAuth,
    Contribution,
    ContributionReaction,
    ContributionTarget,
    ContributionTargetRelationship,
    EmailAuth,
    OAuthDelegatedAuth,
    UserAgent,
)
from .services import TypicalContributionInteraction


async def run_demo(settings: Settings, include_reactions: bool = False) -> str:
    """
    Post root1 -> sub1 -> sub2 under three sessions, like sub1, relate
    root1 to a target and return the rendered thread.
    """
    interaction = TypicalContributionInteraction(settings=settings)
    user_agent = UserAgent(ip_address="127.0.0.1")

    try:
        api_session = await interaction.sessions.create_session(ApiTokenAuth(api_token="token123"), user_agent)
        email_session = await interaction.sessions.create_session(EmailAuth(email="test@example.com"), user_agent)
        oauth_session = await interaction.sessions.create_session(
            OAuthDelegatedAuth(oauth_session_id="session123"), user_agent
        )

        root = Contribution(id="root1", content="Root message", session=email_session)
        await interaction.post_contribution(root)
        await interaction.post_contribution(
            Contribution(id="sub1", content="Sub message 1", parent_id="root1", session=api_session)
        )
        await interaction.post_contribution(
            Contribution(id="sub2", content="Sub message 2", parent_id="sub1", session=oauth_session)
        )
        await interaction.post_contribution(
            ContributionTargetRelationship(contribution=root, target=ContributionTarget(target_id="https://example.com/post"))
        )

        await interaction.post_reaction(
            ContributionReaction(
                reaction_id="sub1-react1",
                contribution_id="sub1",
                reaction="like",
                session=api_session,
            )
        )

        thread = await interaction.get_thread("root1", include_reactions=include_reactions)
        return interaction.render_thread(thread)
    finally:
        await interaction.close()


def main():
    parser = argparse.ArgumentParser(description="Render a demo contribution thread")
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in ThreadStrategy],
        help="Thread reconstruction strategy (default: from settings)",
    )
    parser.add_argument("--reactions", action="store_true", help="Include reactions in the thread")
    args = parser.parse_args()

    settings = get_settings()
    if args.strategy:
        settings = settings.model_copy(update={"thread_strategy": ThreadStrategy(args.strategy)})

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    print(asyncio.run(run_demo(settings, include_reactions=args.reactions)))


if __name__ == "__main__":
    main()
