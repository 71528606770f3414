"""
Digit Sequence

Ordered, growable and shrinkable collection of digits sharing a single
input-enabled flag. The sequence owns its digits: it creates them through a
factory, pushes flag changes into each of them, and calls their release hook
exactly once when they are removed or the sequence is torn down.
"""

import logging
from collections.abc import Callable, Iterator
from typing import Generic, Protocol, TypeVar

from rotary.constants import DEFAULT_INITIAL_DIGITS
from rotary.core.digit_state import DigitState
from rotary.core.errors import SequenceClosedError

logger = logging.getLogger(__name__)


class DigitLike(Protocol):
    """What a sequence needs from each digit it owns."""

    def on_input_enabled_changed(self, enabled: bool) -> None: ...

    def release(self) -> None: ...


D = TypeVar("D", bound=DigitLike)


class DigitSequence(Generic[D]):
    """Left-to-right row of digits that is never empty.

    Example:
        sequence = DigitSequence()          # one DigitState
        sequence.add_digit()
        sequence.can_remove()               # True
        sequence.toggle_input()             # every digit notified once
        sequence.remove_digit()             # rightmost digit released
    """

    def __init__(
        self,
        factory: Callable[[], D] = DigitState,
        input_enabled: bool = False,
        initial_digits: int = DEFAULT_INITIAL_DIGITS,
    ):
        """
        Initialize sequence.

        Args:
            factory: Zero-argument callable creating a new digit with value 0
            input_enabled: Initial shared input-enabled flag
            initial_digits: Number of digits to start with (at least 1)
        """
        self._factory = factory
        self._digits: list[D] = []
        self._input_enabled = bool(input_enabled)
        self._closed = False

        for _ in range(max(1, initial_digits)):
            self.add_digit()

    @property
    def input_enabled(self) -> bool:
        return self._input_enabled

    @property
    def digits(self) -> tuple[D, ...]:
        """Snapshot of the digits, left to right."""
        return tuple(self._digits)

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        return len(self._digits)

    def __iter__(self) -> Iterator[D]:
        return iter(tuple(self._digits))

    def __getitem__(self, index: int) -> D:
        return self._digits[index]

    def add_digit(self) -> D:
        """Create a digit configured with the current flag and append it."""
        self._check_open()
        digit = self._factory()
        digit.on_input_enabled_changed(self._input_enabled)
        self._digits.append(digit)
        logger.debug(f"Digit added (count={len(self._digits)})")
        return digit

    def remove_digit(self) -> D | None:
        """
        Remove and release the rightmost digit.

        Returns:
            The released digit, or None when only one digit remains
        """
        self._check_open()
        if len(self._digits) <= 1:
            logger.debug("Remove ignored: sequence already at minimum size")
            return None

        digit = self._digits.pop()
        digit.release()
        logger.debug(f"Digit removed (count={len(self._digits)})")
        return digit

    def toggle_input(self) -> bool:
        """Flip the shared flag and notify every digit. Returns the new flag."""
        self._check_open()
        self._input_enabled = not self._input_enabled
        for digit in self._digits:
            digit.on_input_enabled_changed(self._input_enabled)
        logger.info(f"Input {'enabled' if self._input_enabled else 'disabled'} for {len(self._digits)} digit(s)")
        return self._input_enabled

    def can_remove(self) -> bool:
        return len(self._digits) > 1

    def teardown(self) -> None:
        """Release every remaining digit. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        while self._digits:
            self._digits.pop().release()
        logger.debug("Digit sequence torn down")

    def _check_open(self) -> None:
        if self._closed:
            raise SequenceClosedError("Digit sequence has been torn down")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.teardown()
        return False
