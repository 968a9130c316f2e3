"""
Builder module - construction APIs for dialog trees.

Provides:
- DialogBuilder / BranchBuilder: callback-style fluent builders
- dialog() / branch(): declarative DSL
"""

from dialogtree.builder.builder import DialogBuilder, BranchBuilder
from dialogtree.builder.dsl import DialogNode, BranchNode, dialog, branch

__all__ = [
    "DialogBuilder",
    "BranchBuilder",
    "DialogNode",
    "BranchNode",
    "dialog",
    "branch",
]
