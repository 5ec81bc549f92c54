"""Word source handing out pronounceable replacement names."""

from __future__ import annotations

import logging
import random
from typing import Callable, Iterator, Optional, Sequence

from .exceptions import NameSpaceExhaustedError
from .words import DICTIONARY

LOG = logging.getLogger(__name__)

# Names longer than this are considered descriptive already.
SHORT_NAME_LIMIT = 2

# Random draws per dictionary word before falling back to a full sweep.
DEFAULT_ATTEMPT_FACTOR = 8


def is_short_name(name: Optional[str]) -> bool:
    """Return ``True`` when *name* is a candidate for replacement."""

    return not name or len(name) <= SHORT_NAME_LIMIT


class NamePool:
    """Caller-owned source of candidate words.

    The pool remembers the most recently issued index and retries a bounded
    number of times to avoid handing out the same word twice in a row.  This
    is only a bias: uniqueness is enforced by the allocators, not here.
    """

    def __init__(
        self,
        words: Sequence[str] = DICTIONARY,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        if not words:
            raise ValueError("NamePool requires at least one word")
        self._words = tuple(words)
        self._rng = rng if rng is not None else random.Random(seed)
        self._last_index: Optional[int] = None

    @property
    def words(self) -> Sequence[str]:
        return self._words

    def reset(self) -> None:
        """Forget the generation history."""

        self._last_index = None

    def reseed(self, seed: Optional[int]) -> None:
        self._rng.seed(seed)
        self.reset()

    def _random_index(self) -> int:
        return self._rng.randrange(len(self._words))

    def next_candidate(self, current_name: Optional[str] = None) -> str:
        """Return *current_name* if it is descriptive, otherwise a fresh word."""

        if not is_short_name(current_name):
            return current_name  # type: ignore[return-value]

        index = self._random_index()
        retries = 1
        limit = len(self._words) - 1
        while index == self._last_index and retries < limit:
            index = self._random_index()
            retries += 1
        if index == self._last_index:
            LOG.debug("word history exhausted after %d retries; reusing %r", retries, self._words[index])
        self._last_index = index
        return self._words[index]

    def sweep(self) -> Iterator[str]:
        """Yield every word once, starting at a random position."""

        start = self._random_index()
        for offset in range(len(self._words)):
            yield self._words[(start + offset) % len(self._words)]

    def draw(self, accept: Callable[[str], bool], max_attempts: Optional[int] = None) -> str:
        """Return a word satisfying *accept*.

        Random candidates are tried first, up to *max_attempts*.  After that
        the whole dictionary is swept once, so the failure below is only
        raised when no word can be accepted at all.
        """

        if max_attempts is None:
            max_attempts = DEFAULT_ATTEMPT_FACTOR * len(self._words)
        for _ in range(max_attempts):
            word = self.next_candidate()
            if accept(word):
                return word
        for word in self.sweep():
            if accept(word):
                return word
        raise NameSpaceExhaustedError(
            f"no acceptable name among {len(self._words)} dictionary words",
            attempts=max_attempts + len(self._words),
        )


__all__ = ["NamePool", "SHORT_NAME_LIMIT", "DEFAULT_ATTEMPT_FACTOR", "is_short_name"]
