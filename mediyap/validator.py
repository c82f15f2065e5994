"""
Validators for lexicon documents.
"""

import json
import os
from typing import Any, Dict, List, Optional

from jsonschema import Draft7Validator

SECTIONS = ("prefixes", "suffixes", "roots")


class LexiconError(Exception):
    """Raised when a lexicon document cannot be loaded or is invalid."""
    pass


class LexiconValidator:
    """Validates lexicon documents for correctness and consistency."""

    def __init__(self, schema_path: Optional[str] = None):
        if schema_path is None:
            # Default to schema in same directory
            current_dir = os.path.dirname(__file__)
            schema_path = os.path.join(current_dir, "lexicon_schema.json")

        self.schema_path = schema_path
        self.schema = self._load_schema()
        self.validator = Draft7Validator(self.schema)

    def _load_schema(self) -> Dict[str, Any]:
        """Load JSON schema from file."""
        try:
            with open(self.schema_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except FileNotFoundError:
            raise LexiconError(f"Schema file not found: {self.schema_path}")
        except json.JSONDecodeError as e:
            raise LexiconError(f"Invalid JSON in schema file: {e}")

    def validate(self, data: Any) -> List[str]:
        """
        Validate a lexicon document against the schema.

        Args:
            data: Parsed lexicon document

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []
        for error in sorted(self.validator.iter_errors(data), key=lambda e: [str(p) for p in e.path]):
            path = '.'.join(str(p) for p in error.path) if error.path else 'root'
            errors.append(f"{path}: {error.message}")
        return errors

    def lint(self, data: Any) -> List[str]:
        """
        Lint a lexicon document for common issues.

        Schema errors are reported first with a SCHEMA_ERROR tag; the
        consistency checks only run on documents that pass the schema.

        Args:
            data: Parsed lexicon document

        Returns:
            List of warning/error messages
        """
        schema_errors = self.validate(data)
        if schema_errors:
            return [f"SCHEMA_ERROR: {message}" for message in schema_errors]

        warnings = []
        warnings.extend(self._check_duplicate_spellings(data))
        warnings.extend(self._check_cross_section_overlap(data))
        warnings.extend(self._check_case(data))
        return warnings

    def _check_duplicate_spellings(self, data: Dict[str, Any]) -> List[str]:
        """Check for spellings registered twice within one section."""
        warnings = []

        for section in SECTIONS:
            seen: Dict[str, str] = {}
            for entry in data.get(section, []):
                meaning = entry["meaning"]
                for spelling in entry["spellings"]:
                    if spelling in seen:
                        if seen[spelling] == meaning:
                            warnings.append(
                                f"DUPLICATE_SPELLING: '{spelling}' appears more than once in {section}"
                            )
                        else:
                            warnings.append(
                                f"CONFLICTING_MEANING: '{spelling}' in {section} maps to both "
                                f"'{seen[spelling]}' and '{meaning}'"
                            )
                    seen[spelling] = meaning

        return warnings

    def _check_cross_section_overlap(self, data: Dict[str, Any]) -> List[str]:
        """Report spellings that are registered in more than one section."""
        warnings = []
        owners: Dict[str, List[str]] = {}

        for section in SECTIONS:
            for entry in data.get(section, []):
                for spelling in entry["spellings"]:
                    sections = owners.setdefault(spelling, [])
                    if section not in sections:
                        sections.append(section)

        for spelling in sorted(owners):
            sections = owners[spelling]
            if len(sections) > 1:
                warnings.append(
                    f"CROSS_SECTION_OVERLAP: '{spelling}' is listed in {', '.join(sections)}"
                )

        return warnings

    def _check_case(self, data: Dict[str, Any]) -> List[str]:
        """Input is lower-cased before lookup, so upper-case spellings never match."""
        warnings = []

        for section in SECTIONS:
            for entry in data.get(section, []):
                for spelling in entry["spellings"]:
                    if spelling != spelling.lower():
                        warnings.append(
                            f"NON_LOWERCASE_SPELLING: '{spelling}' in {section} can never match"
                        )

        return warnings


def validate_lexicon(data: Any, schema_path: Optional[str] = None) -> List[str]:
    """Validate a lexicon document against the schema."""
    validator = LexiconValidator(schema_path)
    return validator.validate(data)


def lint_lexicon(data: Any) -> List[str]:
    """Lint a lexicon document for issues."""
    validator = LexiconValidator()
    return validator.lint(data)
