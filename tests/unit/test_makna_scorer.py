"""Unit tests for translation scoring."""

import pytest

from ayah_search.config.settings import MaknaWeights
from ayah_search.core.makna_scorer import MaknaScorer
from ayah_search.models.verse import VerseRecord


class TestMaknaScorer:
    """Test cases for the MaknaScorer class."""

    @pytest.fixture
    def scorer(self):
        return MaknaScorer()

    @pytest.fixture
    def surga_verse(self, corpus_records):
        return next(r for r in corpus_records if r.verse_key == "2:82")

    def test_length_bonus(self, scorer):
        """Test the bonus for short translations."""
        assert scorer.length_bonus(0) == pytest.approx(5.0)
        assert scorer.length_bonus(100) == pytest.approx(2.5)
        assert scorer.length_bonus(200) == pytest.approx(0.0)
        assert scorer.length_bonus(400) == pytest.approx(0.0)

    def test_tokens_skip_short_words(self, scorer):
        """Test that tokens shorter than three characters are dropped."""
        assert scorer.tokens("di surga") == ["surga"]
        assert scorer.tokens("yang kamu sembah") == ["yang", "kamu", "sembah"]

    def test_keyword_score(self, scorer):
        """Test token, phrase and length components together."""
        score = scorer.keyword_score("surga dan neraka", "surga", ["surga"])
        # 10 token, 20 phrase, (1 - 16/200) * 5 length
        assert score == pytest.approx(34.6)

    def test_keyword_score_partial_tokens(self, scorer):
        """Test a query whose tokens only partly match."""
        score = scorer.keyword_score("surga dan neraka", "surga firdaus", ["surga", "firdaus"])
        assert score == pytest.approx(10.0 + 4.6)

    def test_fuzzy_score(self, scorer):
        """Test exact and single-typo fuzzy scores."""
        assert scorer.fuzzy_score(0, 0) == pytest.approx(85.0)
        assert scorer.fuzzy_score(1, 100) == pytest.approx(62.5)
        assert scorer.fuzzy_score(2, 200) == pytest.approx(0.0)

    def test_highlight_token_keeps_original_case(self, scorer):
        """Test that the highlight keeps the translation's casing."""
        translation = "Katakanlah, Dialah Allah, Yang Maha Esa."
        assert scorer.highlight_token(translation, "allah") == "Allah"

    def test_highlight_token_old_spelling(self, scorer, surga_verse):
        """Test highlighting a word matched through old spelling."""
        assert scorer.highlight_token(surga_verse.translation, "syurga") == "surga"

    def test_highlight_token_none(self, scorer):
        """Test that unmatched queries have no highlight."""
        assert scorer.highlight_token("Segala puji bagi Allah.", "neraka") is None
        assert scorer.highlight_token("Segala puji bagi Allah.", "") is None

    def test_score_keyword(self, scorer, surga_verse):
        """Test keyword stage results."""
        results = scorer.score_keyword([surga_verse], "surga")

        assert len(results) == 1
        expected = 30.0 + (1 - len(surga_verse.translation) / 200) * 5
        assert results[0].score == pytest.approx(expected)
        assert results[0].highlight_token == "surga"

    def test_score_fuzzy_single_typo(self, scorer, surga_verse):
        """Test the fuzzy stage for a one-edit typo."""
        results = scorer.score_fuzzy([surga_verse], "syurga")

        assert len(results) == 1
        expected = 60.0 + (1 - len(surga_verse.translation) / 200) * 5
        assert results[0].score == pytest.approx(expected)
        assert results[0].highlight_token == "surga"

    def test_score_fuzzy_exact_word(self, scorer, surga_verse):
        """Test the fuzzy stage for an exact word."""
        results = scorer.score_fuzzy([surga_verse], "penghuni")
        assert results[0].score == pytest.approx(80.0 + (1 - len(surga_verse.translation) / 200) * 5)

    def test_score_fuzzy_rejects_two_edits(self, scorer, surga_verse):
        """Test that two edits are too many by default."""
        assert scorer.score_fuzzy([surga_verse], "syurgah") == []

    def test_score_fuzzy_empty_translation(self, scorer):
        """Test that an empty translation never matches."""
        verse = VerseRecord.from_source(id=1, surah_id=1, number=1, translation="")
        assert scorer.score_fuzzy([verse], "surga") == []

    def test_custom_typo_distance(self, surga_verse):
        """Test a wider configured typo distance."""
        scorer = MaknaScorer(MaknaWeights(max_typo_distance=2))
        results = scorer.score_fuzzy([surga_verse], "syurgah")
        expected = 60.0 + (1 - len(surga_verse.translation) / 200) * 5
        assert results[0].score == pytest.approx(expected)
