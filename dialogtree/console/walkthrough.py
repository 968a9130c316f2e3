"""
Console walkthrough - plays a dialog in the terminal.

Prints the dialog name, then the lines of the current branch with the
speaker highlighted. When the branch continues, the choices are listed
as [1]..[n] and a single key press picks one. Keys outside the range
are ignored. Playback stops after a branch with no children.

Works with Dialog and FrozenDialog alike.

Usage:
    run_dialog(dialog)

    # Scripted input (tests, demos)
    keys = iter("21")
    run_dialog(dialog, read_key=lambda: next(keys))
"""

from __future__ import annotations

import logging
import math
import sys
import time
from typing import Any, Callable, Optional, TextIO

from colorama import Fore, Style

from dialogtree.config import ConsoleConfig
from dialogtree.core.payload import display_text

KeyReader = Callable[[], str]


def read_single_key() -> str:
    """
    Read one key press from the terminal without waiting for Enter.

    When stdin is not a terminal (piped input) the next character is read
    instead.

    Raises:
        EOFError: If piped input ends before a key is read
    """
    if not sys.stdin.isatty():
        key = sys.stdin.read(1)
        if not key:
            raise EOFError("Input ended before a choice was made")
        return key

    try:
        import msvcrt
    except ImportError:
        msvcrt = None

    if msvcrt is not None:
        return msvcrt.getwch()

    import termios
    import tty

    fd = sys.stdin.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


class ConsoleWalkthrough:
    """
    Interactive terminal playback of a dialog tree.

    Args:
        config: Console configuration
        read_key: Returns one key press per call
        out: Stream to write to (default: sys.stdout)
        sleep: Called with a delay in seconds between lines
    """

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        read_key: Optional[KeyReader] = None,
        out: Optional[TextIO] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config or ConsoleConfig()
        self.read_key = read_key or read_single_key
        self.out = out
        self.sleep = sleep
        self.logger = logging.getLogger(__name__)

    def _write(self, text: str) -> None:
        print(text, file=self.out or sys.stdout)

    def _line_delay(self, text: str) -> float:
        if self.config.time_scale <= 0 or not text:
            return 0.0
        return math.ceil(math.log(len(text)) * self.config.time_scale)

    def write_title(self, dialog: Any) -> None:
        title = dialog.name if dialog.name is not None else self.config.unnamed_title
        self._write(f"{Fore.RED}{title}{Style.RESET_ALL}")

    def write_lines(self, branch: Any) -> None:
        """Print every line of a branch with its speaker."""
        if self.config.initial_delay > 0:
            self.sleep(self.config.initial_delay)

        for line in branch.lines:
            text = display_text(line)
            speaker = getattr(line, 'id', None)
            if speaker:
                self._write(f"{Fore.YELLOW}{speaker}{Style.RESET_ALL}: {text}")
            else:
                self._write(text)

            delay = self._line_delay(text)
            if delay > 0:
                self.sleep(delay)

    def write_choices(self, branch: Any) -> None:
        """Print the numbered choices leading out of a branch."""
        for i, child in enumerate(branch.children):
            self._write(f"{Fore.CYAN}[{i + 1}]{Style.RESET_ALL} {child.choice_label()}")

    def read_choice(self, branch: Any) -> int:
        """
        Wait for a valid choice key.

        Returns:
            Index of the chosen child

        Raises:
            ValueError: If the branch has no children or more than max_choices
        """
        count = len(branch.children)
        if count == 0:
            raise ValueError("Branch has no choices")
        if count > self.config.max_choices:
            raise ValueError(
                f"Branch has {count} choices, at most {self.config.max_choices} can be read"
            )

        while True:
            key = self.read_key()
            if key == '\x03':  # Ctrl+C in raw mode
                raise KeyboardInterrupt
            if len(key) != 1 or not key.isdigit():
                continue
            choice = ord(key) - ord('1')
            if 0 <= choice < count:
                break

        self._write(f"{Fore.GREEN}[{choice + 1}]{Style.RESET_ALL}")
        return choice

    def run(self, dialog: Any) -> list[int]:
        """
        Play a dialog until a terminal branch is printed.

        Returns:
            Indices of the choices taken, in order
        """
        self.write_title(dialog)

        choices: list[int] = []
        current = dialog.root
        while True:
            self.write_lines(current)
            if not current.continues:
                break
            self.write_choices(current)
            choice = self.read_choice(current)
            self.logger.debug(f"Choice {choice + 1} at depth {len(choices)}")
            choices.append(choice)
            current = current.children[choice]

        return choices


def run_dialog(
    dialog: Any,
    config: Optional[ConsoleConfig] = None,
    read_key: Optional[KeyReader] = None,
    out: Optional[TextIO] = None,
) -> list[int]:
    """Play a dialog in the terminal. See ConsoleWalkthrough."""
    return ConsoleWalkthrough(config, read_key, out).run(dialog)
