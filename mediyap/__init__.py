"""
MediYap: decode medical terms into plain English from their prefixes,
roots and suffixes.
"""

__version__ = "0.1.0"
__author__ = "MediYap Team"

from .lexicon import Lexicon, MorphemeEntry, default_lexicon
from .segmenter import Morpheme, MorphemeKind, Segmentation, Segmenter, segment
from .composer import FALLBACK_PHRASE, PhraseComposer, compose
from .decoder import MedicalDecoder, decode, normalize
from .validator import LexiconError, lint_lexicon, validate_lexicon

__all__ = [
    "Lexicon",
    "MorphemeEntry",
    "default_lexicon",
    "Morpheme",
    "MorphemeKind",
    "Segmentation",
    "Segmenter",
    "segment",
    "FALLBACK_PHRASE",
    "PhraseComposer",
    "compose",
    "MedicalDecoder",
    "decode",
    "normalize",
    "LexiconError",
    "lint_lexicon",
    "validate_lexicon",
]
