"""
Sample dialogs used by the command line demo and the tests.
"""

from __future__ import annotations

from dialogtree.builder import DialogBuilder
from dialogtree.core import Dialog, DialogLine, EntryLabel, speaker

npc = speaker("Npc")
player = speaker("Player")


def cat_dialog() -> Dialog[EntryLabel, DialogLine]:
    """A cat, a person, and three ways to answer."""
    return (
        DialogBuilder.create("cat")
        .start_branch(lambda b: b
            .add_lines(("Cat", "Meow"), ("Person", "Hey!"))
            .add_branch(lambda c: c.add_lines(("Cat", "No.")))
            .add_branch(lambda c: c.add_lines(("Cat", "Yes.")))
            .add_branch(lambda c: c.add_lines(("Cat", "Maybe.")))
        )
        .build()
    )


def puzzle_dialog() -> Dialog[EntryLabel, DialogLine]:
    """An NPC asks for 1 + 1, four answers follow."""
    return (
        DialogBuilder.create("Mega super duper dialog")
        .start_branch(lambda b: b
            .add_lines(
                npc("Hello adventurer!"),
                npc("I have a puzzle for you."),
                npc("What is 1 + 1 equal to?"),
            )
            .add_branch(lambda c: c
                .add_lines(
                    player("It's 1!"),
                    npc("This is not boolean algebra. It's 2."),
                )
            )
            .add_branch(lambda c: c
                .add_lines(
                    player("It's 2!"),
                    npc("You are right!"),
                    npc("You are the smartest adventurer I have ever met."),
                )
            )
            .add_branch(lambda c: c
                .add_lines(
                    player("It's 3!"),
                    npc("No. It's 2."),
                )
            )
            .add_branch(lambda c: c
                .entry(EntryLabel(text="Guess wildly"))
                .add_lines(
                    player("It's 4!"),
                    npc("No. It's 2."),
                    player("Am I really this bad at maths?"),
                    npc("Seems so..."),
                )
            )
        )
        .build()
    )


SAMPLES = {
    "cat": cat_dialog,
    "puzzle": puzzle_dialog,
}
