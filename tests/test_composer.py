"""
Unit tests for phrase composition.
"""

import unittest

from mediyap import FALLBACK_PHRASE, Morpheme, MorphemeKind, PhraseComposer, Segmentation, compose


def prefix(spelling, meaning):
    return Morpheme(MorphemeKind.PREFIX, spelling, meaning)


def root(spelling, meaning):
    return Morpheme(MorphemeKind.ROOT, spelling, meaning)


def suffix(spelling, meaning):
    return Morpheme(MorphemeKind.SUFFIX, spelling, meaning)


def unmatched(spelling):
    return Morpheme(MorphemeKind.UNMATCHED, spelling)


class TestComposer(unittest.TestCase):
    """Test cases for the phrase composer."""

    def test_root_alone(self):
        """Test a single root yields its meaning alone."""
        self.assertEqual(compose(Segmentation([root("nephr", "kidney")])), "kidney")

    def test_prefix_root_suffix(self):
        """Test meanings join in prefix, root, suffix order."""
        segmentation = Segmentation([
            prefix("hypo", "low"),
            root("glyc", "glucose/sugar"),
            suffix("emia", "presence in blood"),
        ])
        self.assertEqual(compose(segmentation), "low glucose/sugar presence in blood")

    def test_multiple_roots(self):
        """Test consecutive roots join with plain spaces."""
        segmentation = Segmentation([
            root("thromb", "clot"),
            unmatched("o"),
            root("cyt", "cell"),
            unmatched("o"),
            suffix("penia", "deficiency"),
        ])
        self.assertEqual(compose(segmentation), "clot cell deficiency")

    def test_no_root(self):
        """Test prefix and suffix without a root still compose."""
        segmentation = Segmentation([prefix("poly", "many"), suffix("uria", "presence in urine")])
        self.assertEqual(compose(segmentation), "many presence in urine")
        self.assertEqual(compose(Segmentation([suffix("itis", "inflammation")])), "inflammation")

    def test_unmatched_skipped(self):
        """Test unmatched spans contribute nothing by default."""
        segmentation = Segmentation([prefix("tachy", "fast"), root("cardi", "heart"), unmatched("a")])
        self.assertEqual(compose(segmentation), "fast heart")

    def test_fallback(self):
        """Test nothing matched gives the fallback phrase."""
        self.assertEqual(compose(Segmentation([])), FALLBACK_PHRASE)
        self.assertEqual(compose(Segmentation([unmatched("xyzzyqq")])), FALLBACK_PHRASE)
        self.assertTrue(FALLBACK_PHRASE)

    def test_show_unmatched(self):
        """Test unmatched residue rendered in brackets."""
        composer = PhraseComposer(show_unmatched=True)
        segmentation = Segmentation([prefix("hyper", "high"), unmatched("qq"), suffix("emia", "presence in blood")])
        self.assertEqual(composer.compose(segmentation), "high [qq] presence in blood")
        self.assertEqual(composer.compose(Segmentation([unmatched("qq")])), FALLBACK_PHRASE)


if __name__ == '__main__':
    unittest.main()
