"""Bounded counter of live glyphs."""

from ..constants import MAXIMUM_AMOUNT_OF_CHARACTERS


class CharacterCounter:
    """Admission gate for glyph creation.

    Hitting either bound is a steady-state condition, so both
    :meth:`increment` and :meth:`decrement` silently no-op there and report
    whether the value moved.
    """

    def __init__(self, maximum=MAXIMUM_AMOUNT_OF_CHARACTERS):
        self.maximum = max(0, int(maximum))
        self.value = 0

    @property
    def at_capacity(self):
        return self.value >= self.maximum

    def increment(self):
        if self.value >= self.maximum:
            return False
        self.value += 1
        return True

    def decrement(self):
        if self.value <= 0:
            return False
        self.value -= 1
        return True

    def reset(self):
        self.value = 0

    def __repr__(self):
        return f"CharacterCounter({self.value}/{self.maximum})"
