"""
Input line display helpers.

The input bar hands its buffer to render_input() on every change before the
characters are written to the terminal grid. InputHistory backs the up/down
keys.
"""

from typing import List

from tools.bidi import reverse_run_aware


def render_input(buffer: str) -> str:
    """Edit buffer as it should be written to the terminal cells."""
    return reverse_run_aware(buffer)


class InputHistory:
    """
    Submitted input lines, newest first.

    The cursor is -1 when nothing is selected (a fresh, empty line).
    """

    def __init__(self):
        self.history: List[str] = []
        self.step = -1

    def add(self, text: str):
        self.history.insert(0, text)
        self.step = -1

    def current(self) -> str:
        if self.step < 0:
            return ""
        return self.history[self.step]

    def before(self) -> str:
        """Move to the next older entry (up key)."""
        self.step = min(self.step + 1, len(self.history) - 1)
        return self.current()

    def after(self) -> str:
        """Move to the next newer entry (down key)."""
        self.step = max(self.step - 1, -1)
        return self.current()

    def before_display(self) -> str:
        return render_input(self.before())

    def after_display(self) -> str:
        return render_input(self.after())

    def __len__(self) -> int:
        return len(self.history)
