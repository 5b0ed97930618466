"""Protected-span registry.

Finished HTML fragments are swapped out for opaque tokens while the
text-rewriting passes run, then swapped back in by :meth:`ProtectedSpans.restore_all`.
Tokens are built from ``<``, which never survives :func:`escape_html`, so user
text cannot forge one.  A registry belongs to exactly one body render.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from loguru import logger

TOKEN_RE = re.compile(r"<<<PROTECTED:(\d+)>>>")


@dataclass(frozen=True)
class ProtectedSpan:
    fragment: str
    block: bool = False


class ProtectedSpans:
    """Ordered list of protected fragments for a single render call."""

    def __init__(self) -> None:
        self._spans: list[ProtectedSpan] = []

    def __len__(self) -> int:
        return len(self._spans)

    @staticmethod
    def token(index: int) -> str:
        return f"<<<PROTECTED:{index}>>>"

    def protect(self, fragment: str, block: bool = False) -> str:
        """Store *fragment* and return the token that stands in for it."""
        self._spans.append(ProtectedSpan(fragment=fragment, block=block))
        return self.token(len(self._spans) - 1)

    def is_block(self, line: str) -> bool:
        """True if *line* is nothing but a block-level placeholder."""
        m = TOKEN_RE.fullmatch(line.strip())
        if not m:
            return False
        index = int(m.group(1))
        return index < len(self._spans) and self._spans[index].block

    def restore(self, text: str) -> str:
        """Resolve every token in *text*, including tokens nested in fragments.

        A fragment only ever embeds tokens issued before it, so each pass
        lowers the highest index left and the loop ends.  Unknown indices are
        left in place.
        """
        while True:
            restored = TOKEN_RE.sub(self._lookup, text)
            if restored == text:
                return restored
            text = restored

    def restore_all(self, text: str) -> str:
        """Replace every issued token with its fragment, in issuance order."""
        for index, span in enumerate(self._spans):
            text = text.replace(self.token(index), span.fragment)
        # a later fragment can carry an earlier token back in
        text = self.restore(text)
        leftover = TOKEN_RE.search(text)
        if leftover:
            logger.error(f"Unresolved protected span token {leftover.group(0)!r} after restore")
        return text

    def _lookup(self, m: re.Match) -> str:
        index = int(m.group(1))
        if index >= len(self._spans):
            return m.group(0)
        return self._spans[index].fragment
