#!/usr/bin/env python3
"""
Passphrase Generator - Interactive Prompts
Reads physical dice rolls from the terminal.
"""

import sys
from typing import Callable, Optional, TextIO


def _read_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


class DiceRollPrompt:
    """Asks for one roll at a time until a valid value is entered

    Only values in [1, sides] ever leave this class. End of input aborts
    the run the same way Ctrl-C does. Prompts and complaints go to stderr
    so stdout carries nothing but passphrases.
    """

    PROMPT = "Enter a dice roll, 1-{sides}: "

    def __init__(
        self,
        input_func: Optional[Callable[[], str]] = None,
        output: Optional[TextIO] = None,
    ):
        self._input = input_func or _read_line
        self._output = output

    def _say(self, message: str, end: str = "\n") -> None:
        output = self._output or sys.stderr
        print(message, end=end, file=output, flush=True)

    def __call__(self, sides: int) -> int:
        prompt = self.PROMPT.format(sides=sides)
        while True:
            self._say(prompt, end="")
            try:
                line = self._input()
            except EOFError:
                raise KeyboardInterrupt("input closed while waiting for a dice roll") from None

            try:
                value = int(line.strip())
            except ValueError:
                self._say("Parse error. Try again or ^C to cancel.")
                continue

            if 1 <= value <= sides:
                return value
            self._say(f"{value} out of range 1-{sides}")
