"""
Search Relevance Tests

Per-token weights across category, tags, dominant color, and description,
the thin-metadata penalty, and result filtering/ordering for search.

Run:
----
    pytest tests/test_relevance.py -v
"""

import pytest

from pinmeta.models.config import RankingConfig
from pinmeta.stages.relevance import score_relevance, score_search_results, search_images
from pinmeta.utils.text import tokenize_query

from conftest import make_image


class TestTokenizeQuery:

    def test_lowercases_trims_and_splits(self):
        assert tokenize_query("  Forest   GREEN ") == ["forest", "green"]

    def test_drops_short_tokens(self):
        assert tokenize_query("a forest x") == ["forest"]

    def test_keeps_repeated_tokens(self):
        assert tokenize_query("cat cat") == ["cat", "cat"]

    @pytest.mark.parametrize("query", ["", "   ", "a b c"])
    def test_no_usable_tokens(self, query):
        assert tokenize_query(query) == []


class TestScoreRelevance:

    def test_forest_scenario(self, forest_image):
        # tag exact 20 + description whole word 12; "nature" does not contain "forest"
        assert score_relevance(forest_image, "forest") == 32

    def test_query_is_case_insensitive(self, forest_image):
        assert score_relevance(forest_image, "  FOREST ") == 32

    @pytest.mark.parametrize("query", ["", "   ", "a", "x y"])
    def test_empty_query_scores_zero(self, forest_image, query):
        assert score_relevance(forest_image, query) == 0

    def test_category_exact(self):
        img = make_image("i1", category="Food", description="")
        assert score_relevance(img, "food") == 25

    def test_category_substring(self):
        img = make_image("i1", category="Architecture", description="")
        assert score_relevance(img, "arch") == 10

    def test_each_tag_counts_independently(self):
        img = make_image("i1", tags=["cat", "cats", "catnip"], category="Animals", description="")
        assert score_relevance(img, "cat") == 20 + 5 + 5

    def test_tags_match_case_insensitively(self):
        img = make_image("i1", tags=["Sunset"])
        assert score_relevance(img, "sunset") == 20

    def test_color_exact_with_hash_prefix(self):
        img = make_image("i1", dominant_color="#FF0000")
        assert score_relevance(img, "ff0000") == 20
        assert score_relevance(img, "#ff0000") == 20

    def test_color_substring(self):
        img = make_image("i1", dominant_color="#ff0000")
        # description is long enough, so no thin-metadata penalty
        assert score_relevance(img, "ff00") == 5

    def test_description_partial_word(self):
        img = make_image("i1", description="beautiful forestry landscapes")
        assert score_relevance(img, "forest") == 4

    def test_description_whole_word(self):
        img = make_image("i1", description="walking in the forest today")
        assert score_relevance(img, "forest") == 12

    def test_short_description_penalty(self):
        img = make_image("i1", tags=["sunset"], description="short")
        assert score_relevance(img, "sun") == pytest.approx(5 * 0.8)

    def test_no_penalty_when_score_reaches_floor(self):
        img = make_image("i1", category="Food", description="short")
        assert score_relevance(img, "food") == 25

    def test_no_penalty_for_long_description(self):
        img = make_image("i1", tags=["sunset"], description="a long enough description")
        assert score_relevance(img, "sun") == 5

    def test_multi_token_sums(self, forest_image):
        # forest: 32; green: tag exact 20
        assert score_relevance(forest_image, "forest green") == 52

    def test_repeated_token_counts_twice(self, forest_image):
        assert score_relevance(forest_image, "forest forest") == 64

    def test_regex_characters_in_token(self, forest_image):
        assert score_relevance(forest_image, "(forest") >= 0
        assert score_relevance(forest_image, "fo.est") == 0

    def test_never_negative(self, forest_image):
        for query in ["zzz", "forest", "#00ff00", "quiet path"]:
            assert score_relevance(forest_image, query) >= 0

    def test_custom_weights(self):
        img = make_image("i1", category="Food")
        config = RankingConfig(category_exact_weight=3.0)
        assert score_relevance(img, "food", config) == 3.0


class TestSearchImages:

    def test_excludes_non_matching_and_sorts_descending(self, forest_image):
        tagged = make_image("i_tag", tags=["forest"])
        described = make_image("i_desc", description="deep in the forest tonight")
        unrelated = make_image("i_none")
        results = search_images([unrelated, described, tagged, forest_image], "forest")
        assert [img.image_id for img in results] == ["img_forest", "i_tag", "i_desc"]

    def test_ties_keep_input_order(self):
        a = make_image("a", tags=["forest"])
        b = make_image("b", tags=["forest"])
        c = make_image("c", tags=["forest"])
        assert [img.image_id for img in search_images([b, c, a], "forest")] == ["b", "c", "a"]

    def test_empty_query_returns_nothing(self, forest_image):
        assert search_images([forest_image], "") == []

    def test_scored_results_expose_scores(self, forest_image):
        scored = score_search_results([forest_image], "forest")
        assert len(scored) == 1
        assert scored[0].score == 32
