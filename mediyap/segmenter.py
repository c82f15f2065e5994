"""
Morpheme segmenter for medical terms.

Splits a normalized word into [prefix] [root | unmatched]* [suffix] using
longest-match-first scans anchored at the start and end of the word, then
fills the middle span with roots.
"""

from enum import Enum
from typing import Any, Dict, Iterator, List, NamedTuple, Optional, Tuple

from .lexicon import Lexicon, default_lexicon


class MorphemeKind(Enum):
    PREFIX = "prefix"
    ROOT = "root"
    SUFFIX = "suffix"
    UNMATCHED = "unmatched"


class Morpheme(NamedTuple):
    """A span of the input word, tagged with what it matched."""
    kind: MorphemeKind
    spelling: str
    meaning: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "spelling": self.spelling,
            "meaning": self.meaning,
        }


class Segmentation:
    """Ordered morpheme spans covering the whole input word."""

    def __init__(self, morphemes: List[Morpheme]):
        self.morphemes = tuple(morphemes)

    def __iter__(self) -> Iterator[Morpheme]:
        return iter(self.morphemes)

    def __len__(self) -> int:
        return len(self.morphemes)

    def __getitem__(self, index: int) -> Morpheme:
        return self.morphemes[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Segmentation):
            return self.morphemes == other.morphemes
        return NotImplemented

    def __repr__(self) -> str:
        parts = ", ".join(f"{m.kind.value}:{m.spelling}" for m in self.morphemes)
        return f"Segmentation([{parts}])"

    @property
    def text(self) -> str:
        """The input word, rebuilt from the spans."""
        return "".join(m.spelling for m in self.morphemes)

    def _first(self, kind: MorphemeKind) -> Optional[Morpheme]:
        for morpheme in self.morphemes:
            if morpheme.kind == kind:
                return morpheme
        return None

    @property
    def prefix(self) -> Optional[Morpheme]:
        return self._first(MorphemeKind.PREFIX)

    @property
    def suffix(self) -> Optional[Morpheme]:
        return self._first(MorphemeKind.SUFFIX)

    @property
    def roots(self) -> List[Morpheme]:
        return [m for m in self.morphemes if m.kind == MorphemeKind.ROOT]

    @property
    def unmatched(self) -> List[Morpheme]:
        return [m for m in self.morphemes if m.kind == MorphemeKind.UNMATCHED]

    @property
    def has_matches(self) -> bool:
        """True if at least one span carries a meaning."""
        return any(m.kind != MorphemeKind.UNMATCHED for m in self.morphemes)

    @property
    def is_complete(self) -> bool:
        """True if every character of the word was matched."""
        return bool(self.morphemes) and not self.unmatched

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "complete": self.is_complete,
            "morphemes": [m.to_dict() for m in self.morphemes],
        }


class Segmenter:
    """Longest-match-first, anchor-ordered morpheme segmenter."""

    def __init__(self, lexicon: Lexicon):
        self.lexicon = lexicon

    def longest_prefix(self, word: str) -> Optional[Tuple[str, str]]:
        """Longest prefix spelling that starts the word."""
        for length in range(min(self.lexicon.max_prefix_length, len(word)), 0, -1):
            meaning = self.lexicon.lookup_prefix(word[:length])
            if meaning is not None:
                return word[:length], meaning
        return None

    def longest_suffix(self, word: str, start: int = 0) -> Optional[Tuple[str, str]]:
        """Longest suffix spelling that ends the word and lies within word[start:]."""
        for length in range(min(self.lexicon.max_suffix_length, len(word) - start), 0, -1):
            candidate = word[len(word) - length:]
            meaning = self.lexicon.lookup_suffix(candidate)
            if meaning is not None:
                return candidate, meaning
        return None

    def longest_root(self, word: str, pos: int, end: int) -> Optional[Tuple[str, str]]:
        """Longest root spelling starting at pos and ending no later than end."""
        for length in range(min(self.lexicon.max_root_length, end - pos), 0, -1):
            candidate = word[pos:pos + length]
            meaning = self.lexicon.lookup_root(candidate)
            if meaning is not None:
                return candidate, meaning
        return None

    def _anchor_prefix(self, word: str) -> Optional[Tuple[str, str]]:
        """
        Pick the prefix at position 0, if any.

        The prefix competes with a root starting at 0 that ends before the
        word's suffix, and with a suffix overlapping the prefix span: the
        longer span wins, a tie keeps the prefix.
        """
        prefix = self.longest_prefix(word)
        if prefix is None:
            return None

        size = len(prefix[0])
        suffix = self.longest_suffix(word)
        suffix_start = len(word) - len(suffix[0]) if suffix is not None else len(word)

        # Only a root the middle scan can actually place may displace the prefix
        root = self.longest_root(word, 0, suffix_start)
        if root is not None and len(root[0]) > size:
            return None

        if suffix is not None and suffix_start < size and len(suffix[0]) > size:
            return None

        return prefix

    def segment(self, word: str) -> Segmentation:
        """
        Segment a normalized (trimmed, lower-cased) word.

        Args:
            word: The word to segment

        Returns:
            Segmentation whose spans concatenate back to word
        """
        morphemes: List[Morpheme] = []
        pos = 0

        prefix = self._anchor_prefix(word)
        if prefix is not None:
            morphemes.append(Morpheme(MorphemeKind.PREFIX, *prefix))
            pos = len(prefix[0])

        # Reserve the suffix span before scanning the middle
        end = len(word)
        suffix = self.longest_suffix(word, pos)
        if suffix is not None:
            end -= len(suffix[0])

        unmatched_start = None
        while pos < end:
            root = self.longest_root(word, pos, end)
            if root is None:
                if unmatched_start is None:
                    unmatched_start = pos
                pos += 1
                continue

            if unmatched_start is not None:
                morphemes.append(Morpheme(MorphemeKind.UNMATCHED, word[unmatched_start:pos]))
                unmatched_start = None
            morphemes.append(Morpheme(MorphemeKind.ROOT, *root))
            pos += len(root[0])

        if unmatched_start is not None:
            morphemes.append(Morpheme(MorphemeKind.UNMATCHED, word[unmatched_start:end]))

        if suffix is not None:
            morphemes.append(Morpheme(MorphemeKind.SUFFIX, *suffix))

        return Segmentation(morphemes)


def segment(word: str, lexicon: Optional[Lexicon] = None) -> Segmentation:
    """Segment a normalized word against a lexicon (the built-in one by default)."""
    if lexicon is None:
        lexicon = default_lexicon()
    return Segmenter(lexicon).segment(word)
