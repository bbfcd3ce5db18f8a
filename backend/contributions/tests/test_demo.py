"""
Test: Demo scenario and public API
"""

import pytest

import contributions
from contributions.config import ThreadStrategy
from contributions.demo import run_demo


class TestDemo:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("strategy", list(ThreadStrategy))
    async def test_renders_reference_thread(self, settings, strategy):
        rendered = await run_demo(settings.model_copy(update={"thread_strategy": strategy}))

        assert rendered.splitlines() == [
            "Contribution ID: root1",
            "Content: Root message",
            "root1 Subcontributions:",
            "  Contribution ID: sub1",
            "  Content: Sub message 1",
            "  sub1 Subcontributions:",
            "    Contribution ID: sub2",
            "    Content: Sub message 2",
        ]

    @pytest.mark.asyncio
    async def test_reactions_flag(self, settings):
        rendered = await run_demo(settings, include_reactions=True)
        assert "  Reactions: like" in rendered.splitlines()


def test_public_api_exports():
    for name in contributions.__all__:
        assert getattr(contributions, name) is not None
