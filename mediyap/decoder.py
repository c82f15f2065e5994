"""
Medical term decoder: the public entry point wiring lexicon, segmenter
and composer together.
"""

from functools import lru_cache
from typing import Any, Dict, Optional

from .composer import PhraseComposer
from .lexicon import Lexicon, default_lexicon
from .log import get_logger
from .segmenter import Segmentation, Segmenter

logger = get_logger(__name__)


def normalize(term: str) -> str:
    """Trim surrounding whitespace and lower-case the term."""
    return term.strip().lower()


class MedicalDecoder:
    """Decodes medical terms into plain English."""

    def __init__(self, lexicon: Optional[Lexicon] = None, show_unmatched: bool = False):
        self.lexicon = lexicon if lexicon is not None else default_lexicon()
        self.segmenter = Segmenter(self.lexicon)
        self.composer = PhraseComposer(show_unmatched)

    def segment(self, term: str) -> Segmentation:
        """Segment the normalized term."""
        return self.segmenter.segment(normalize(term))

    def decode(self, term: str) -> str:
        """
        Decode a medical term.

        Args:
            term: Medical term, in any case, possibly padded with whitespace

        Returns:
            Plain-English phrase, or the fallback phrase if nothing matched
        """
        segmentation = self.segment(term)
        phrase = self.composer.compose(segmentation)
        logger.debug("decoded", term=term, morphemes=segmentation, phrase=phrase)
        return phrase

    def explain(self, term: str) -> Dict[str, Any]:
        """
        Decode a term and report how it was split.

        Returns:
            Dictionary with the original term, the normalized form, the
            phrase and the per-morpheme breakdown
        """
        segmentation = self.segment(term)
        return {
            "term": term,
            "normalized": segmentation.text,
            "phrase": self.composer.compose(segmentation),
            "complete": segmentation.is_complete,
            "parts": [m.to_dict() for m in segmentation],
        }


@lru_cache(maxsize=1)
def _default_decoder() -> MedicalDecoder:
    return MedicalDecoder()


def decode(term: str) -> str:
    """Decode a medical term with the built-in lexicon."""
    return _default_decoder().decode(term)
