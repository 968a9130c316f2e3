"""
Console module - terminal playback of dialog trees.
"""

from dialogtree.console.walkthrough import ConsoleWalkthrough, run_dialog, read_single_key

__all__ = [
    "ConsoleWalkthrough",
    "run_dialog",
    "read_single_key",
]
