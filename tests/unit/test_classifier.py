"""Unit tests for the token classifier."""

from clause_analysis.models.enums import TokenTag
from clause_analysis.parsers.classifier import TokenClassifier
from clause_analysis.parsers.tokenizer import tokenize


def classify(text):
    return TokenClassifier().classify(tokenize(text))


class TestTagPrecedence:
    """Tests for the order in which tags are assigned."""

    def test_each_tag(self):
        """Test one representative word for every tag."""
        tokens, _ = classify("not shall is of each — Client")
        assert [t.tag for t in tokens] == [
            TokenTag.NEG,
            TokenTag.MODAL,
            TokenTag.VERB,
            TokenTag.PREP,
            TokenTag.QUANT,
            TokenTag.GARBAGE,
            TokenTag.OTHER,
        ]

    def test_negation_wins_over_quantifier(self):
        """Test that 'no' and 'none' are negations."""
        tokens, _ = classify("no none")
        assert all(t.tag == TokenTag.NEG for t in tokens)

    def test_classification_ignores_case_and_punctuation(self):
        """Test that tags use the lowercase clean form."""
        tokens, _ = classify("SHALL, Of.")
        assert tokens[0].tag == TokenTag.MODAL
        assert tokens[1].tag == TokenTag.PREP

    def test_original_tokens_are_untouched(self):
        """Test that classification returns new tagged tokens."""
        raw = list(tokenize("shall"))
        tagged, _ = TokenClassifier().classify(raw)
        assert raw[0].tag is None
        assert tagged[0].tag == TokenTag.MODAL


class TestTokenStats:
    """Tests for statistics gathered during classification."""

    def test_counts(self):
        """Test counts for a clause with every major class."""
        _, stats = classify("The Client shall not pay any fee of $5.")

        assert stats.total_count == 9
        assert stats.verb_count == 1
        assert stats.prep_count == 1
        assert stats.quant_count == 1
        assert stats.neg_count == 1
        assert stats.modal_count == 1
        assert stats.binding_modal_count == 1
        assert stats.garbage_count == 0

    def test_binding_modals_are_counted_separately(self):
        """Test that only shall, must and will are binding."""
        _, stats = classify("may shall must might will")
        assert stats.modal_count == 5
        assert stats.binding_modal_count == 3

    def test_garbage_count(self):
        """Test that punctuation-only tokens are counted as garbage."""
        _, stats = classify("fee — ; payment")
        assert stats.garbage_count == 2

    def test_empty(self):
        """Test that an empty clause has zero counts."""
        tokens, stats = classify("")
        assert tokens == ()
        assert stats.total_count == 0
