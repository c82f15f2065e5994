"""
Phrase composer: turns a segmentation into a plain-English phrase.
"""

from typing import List

from .segmenter import MorphemeKind, Segmentation

FALLBACK_PHRASE = "unable to decode"


class PhraseComposer:
    """Joins morpheme meanings in positional order."""

    def __init__(self, show_unmatched: bool = False):
        # Render unmatched residue as "[text]" instead of dropping it
        self.show_unmatched = show_unmatched

    def compose(self, segmentation: Segmentation) -> str:
        """
        Compose a phrase from a segmentation.

        Meanings read prefix, roots, suffix, which is also the order the
        spans occupy in the word, so positional order is kept as-is.

        Args:
            segmentation: Segmentation produced by the segmenter

        Returns:
            The phrase, or FALLBACK_PHRASE when no morpheme matched
        """
        if not segmentation.has_matches:
            return FALLBACK_PHRASE

        words: List[str] = []
        for morpheme in segmentation:
            if morpheme.kind == MorphemeKind.UNMATCHED:
                if self.show_unmatched:
                    words.append(f"[{morpheme.spelling}]")
                continue
            words.append(morpheme.meaning)

        return " ".join(words)


def compose(segmentation: Segmentation, show_unmatched: bool = False) -> str:
    """Compose a phrase from a segmentation."""
    return PhraseComposer(show_unmatched).compose(segmentation)
