"""
Medical morpheme lexicon: prefixes, suffixes and roots with their meanings.

The lexicon is built once and never mutated afterwards, so a single
instance can be shared by any number of decoders and threads.
"""

import os
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, NamedTuple, Optional, Tuple, Union

import yaml

from .log import get_logger
from .validator import SECTIONS, LexiconError, LexiconValidator

logger = get_logger(__name__)

DEFAULT_LEXICON_PATH = os.path.join(os.path.dirname(__file__), "lexicon.yaml")


class MorphemeEntry(NamedTuple):
    """One meaning together with every accepted spelling for it."""
    spellings: Tuple[str, ...]
    meaning: str


EntryLike = Union[MorphemeEntry, Tuple[Iterable[str], str]]


def load_document(path: Optional[str] = None) -> Any:
    """Read a lexicon document from YAML without validating it."""
    path = path or DEFAULT_LEXICON_PATH
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f)
    except FileNotFoundError:
        raise LexiconError(f"Lexicon file not found: {path}")
    except yaml.YAMLError as e:
        raise LexiconError(f"Invalid YAML in lexicon file {path}: {e}")
    except (OSError, UnicodeDecodeError) as e:
        raise LexiconError(f"Cannot read lexicon file {path}: {e}")


def _build_mapping(section: str, entries: Iterable[EntryLike]) -> Dict[str, str]:
    """Expand (spellings, meaning) entries into a spelling -> meaning dict."""
    mapping: Dict[str, str] = {}

    for spellings, meaning in entries:
        if isinstance(spellings, str):
            spellings = (spellings,)
        if not meaning or not meaning.strip():
            raise LexiconError(f"Empty meaning for {section} entry {list(spellings)}")
        for spelling in spellings:
            if spelling in mapping:
                # Last write wins
                logger.warning(
                    "duplicate_spelling",
                    section=section,
                    spelling=spelling,
                    previous=mapping[spelling],
                    meaning=meaning,
                )
            mapping[spelling] = meaning

    return mapping


class Lexicon:
    """Read-only prefix, suffix and root mappings keyed by spelling."""

    def __init__(self, prefixes: Mapping[str, str], suffixes: Mapping[str, str],
                 roots: Mapping[str, str]):
        self.prefixes: Mapping[str, str] = MappingProxyType(dict(prefixes))
        self.suffixes: Mapping[str, str] = MappingProxyType(dict(suffixes))
        self.roots: Mapping[str, str] = MappingProxyType(dict(roots))

        # Longest-match scans start at these lengths
        self.max_prefix_length = max(map(len, self.prefixes), default=0)
        self.max_suffix_length = max(map(len, self.suffixes), default=0)
        self.max_root_length = max(map(len, self.roots), default=0)

    @classmethod
    def from_entries(cls, prefixes: Iterable[EntryLike] = (), suffixes: Iterable[EntryLike] = (),
                     roots: Iterable[EntryLike] = ()) -> "Lexicon":
        """Build a lexicon from (spellings, meaning) entries for each section."""
        return cls(
            prefixes=_build_mapping("prefixes", prefixes),
            suffixes=_build_mapping("suffixes", suffixes),
            roots=_build_mapping("roots", roots),
        )

    @classmethod
    def from_dict(cls, data: Any) -> "Lexicon":
        """
        Build a lexicon from a parsed lexicon document.

        Args:
            data: Mapping with "prefixes", "suffixes" and "roots" lists of
                {"spellings": [...], "meaning": "..."} entries

        Returns:
            The constructed Lexicon

        Raises:
            LexiconError: If the document does not match the lexicon schema
        """
        errors = LexiconValidator().validate(data)
        if errors:
            raise LexiconError("Invalid lexicon: " + "; ".join(errors))

        sections = {
            section: [MorphemeEntry(tuple(e["spellings"]), e["meaning"]) for e in data[section]]
            for section in SECTIONS
        }
        return cls.from_entries(**sections)

    @classmethod
    def from_file(cls, path: Optional[str] = None) -> "Lexicon":
        """Load a lexicon from a YAML file (the built-in lexicon when path is None)."""
        path = path or DEFAULT_LEXICON_PATH
        lexicon = cls.from_dict(load_document(path))
        logger.debug(
            "lexicon_loaded",
            path=str(path),
            prefixes=len(lexicon.prefixes),
            suffixes=len(lexicon.suffixes),
            roots=len(lexicon.roots),
        )
        return lexicon

    def lookup_prefix(self, text: str) -> Optional[str]:
        return self.prefixes.get(text)

    def lookup_suffix(self, text: str) -> Optional[str]:
        return self.suffixes.get(text)

    def lookup_root(self, text: str) -> Optional[str]:
        return self.roots.get(text)

    def __len__(self) -> int:
        return len(self.prefixes) + len(self.suffixes) + len(self.roots)

    def __contains__(self, spelling: object) -> bool:
        return spelling in self.prefixes or spelling in self.suffixes or spelling in self.roots

    def summary(self) -> str:
        lines = ["Medical lexicon"]
        for label, mapping, longest in (
            ("Prefixes", self.prefixes, self.max_prefix_length),
            ("Suffixes", self.suffixes, self.max_suffix_length),
            ("Roots", self.roots, self.max_root_length),
        ):
            meanings = len(set(mapping.values()))
            lines.append(f"  {label + ':':10s} {len(mapping):4d} spellings, "
                         f"{meanings} meanings, longest {longest}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (f"Lexicon(prefixes={len(self.prefixes)}, suffixes={len(self.suffixes)}, "
                f"roots={len(self.roots)})")


@lru_cache(maxsize=1)
def default_lexicon() -> Lexicon:
    """The built-in lexicon, loaded on first use and shared afterwards."""
    return Lexicon.from_file(DEFAULT_LEXICON_PATH)

