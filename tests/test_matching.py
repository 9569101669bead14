# ABOUTME: Tests for fuzzy payee matching
# ABOUTME: Verifies each scoring tier and the ranked search contract

from ynab_mcp.matching import fuzzy_score, search


class TestFuzzyScore:
    """Test the tiered fuzzy_score ladder."""

    def test_exact_match_ignores_case(self):
        assert fuzzy_score("coffee shop", "Coffee Shop") == 100

    def test_prefix_match(self):
        assert fuzzy_score("coffee", "Coffee Shop") == 90

    def test_substring_match(self):
        assert fuzzy_score("shop", "Coffee Shop") == 70

    def test_word_prefix_match(self):
        # "sho" prefixes the word "shop", "cof" prefixes "coffee": 50 + 50 capped at 60
        assert fuzzy_score("sho cof", "Coffee Shop") == 60

    def test_single_word_prefix_scores_fifty(self):
        assert fuzzy_score("mark xyz", "Walmart Market") == 50

    def test_first_fitting_word_wins(self):
        # "walmart" contains "mart" before "market" is considered
        assert fuzzy_score("mart xyz", "Walmart Market") == 30

    def test_surrounding_whitespace_adds_no_empty_words(self):
        # Only "coffee" counts as a word; no bonus for the trailing space
        assert fuzzy_score("coffee ", "Starbucks Coffee") == 50

    def test_trailing_space_does_not_match_everything(self):
        assert fuzzy_score("xyz ", "Coffee Shop") == 0

    def test_leading_space_can_still_hit_substring_tier(self):
        assert fuzzy_score(" coffee", "Starbucks Coffee") == 70

    def test_word_contains_scores_thirty(self):
        assert fuzzy_score("almar qqq", "Walmart Supercenter") == 30

    def test_subsequence_match(self):
        # c-f-s all appear in order in "coffee shop": 3/3 * 40
        assert fuzzy_score("cfs", "Coffee Shop") == 40

    def test_partial_subsequence_above_threshold(self):
        # 2 of 3 chars matched -> 26.67
        assert round(fuzzy_score("cfz", "Coffee Shop"), 2) == 26.67

    def test_subsequence_at_threshold_is_no_match(self):
        # 1 of 2 chars matched -> exactly 20, which is not above 20
        assert fuzzy_score("cz", "Coffee Shop") == 0

    def test_no_match(self):
        assert fuzzy_score("xyz123", "Coffee Shop") == 0

    def test_is_deterministic(self):
        assert fuzzy_score("amzn", "Amazon") == fuzzy_score("amzn", "Amazon")


class TestSearch:
    """Test ranked search over candidates."""

    def test_sorts_by_descending_score(self):
        names = ["Coffee Shop", "The Coffee Place", "Coffee"]
        results = search("coffee", names, key=lambda n: n)
        assert [(name, score) for name, score in results] == [
            ("Coffee", 100),
            ("Coffee Shop", 90),
            ("The Coffee Place", 70),
        ]

    def test_excludes_zero_scores(self):
        results = search("coffee", ["Coffee Shop", "Gas Station"], key=lambda n: n)
        assert [name for name, _ in results] == ["Coffee Shop"]

    def test_limits_to_ten(self):
        names = [f"Store {i}" for i in range(25)]
        results = search("store", names, key=lambda n: n)
        assert len(results) == 10

    def test_ties_keep_input_order(self):
        names = ["Store B", "Store A", "Store C"]
        results = search("store", names, key=lambda n: n)
        assert [name for name, _ in results] == ["Store B", "Store A", "Store C"]

    def test_empty_candidates(self):
        assert search("anything", [], key=lambda n: n) == []
