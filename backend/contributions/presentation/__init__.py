"""
Contribution presentation - plain-text rendering of contributions and threads.
"""

from .formatter import render_contribution, render_thread

__all__ = [
    "render_contribution",
    "render_thread",
]
