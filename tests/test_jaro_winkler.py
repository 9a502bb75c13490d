"""Tests for the Jaro-Winkler metric."""

import pytest

from warlock.similarity import ConcurrencyMode, JaroWinkler, ScoringStrategy
from warlock.similarity.jaro_winkler import jaro, similarity


class TestJaro:
    """Test the unboosted Jaro score."""

    def test_hello_hallo(self) -> None:
        """Test four matches with no transpositions."""
        assert jaro("hello", "hallo") == pytest.approx(0.8667, abs=1e-4)

    def test_martha_marhta(self) -> None:
        """Test one transposition."""
        assert jaro("martha", "marhta") == pytest.approx(0.9444, abs=1e-4)

    def test_no_matches(self) -> None:
        """Test strings with nothing in common."""
        assert jaro("abc", "xyz") == 0.0


class TestJaroWinkler:
    """Test the prefix-boosted score."""

    def test_hello_hallo(self) -> None:
        """Test a one character common prefix."""
        # jaro 0.8667 boosted by 1 * 0.1 * (1 - 0.8667)
        assert similarity("hello", "hallo") == pytest.approx(0.88)

    def test_martha_marhta(self) -> None:
        """Test the classic example."""
        assert similarity("martha", "marhta") == pytest.approx(0.9611, abs=1e-4)

    def test_dixon_dicksonx(self) -> None:
        """Test strings of different lengths."""
        assert similarity("dixon", "dicksonx") == pytest.approx(0.8133, abs=1e-4)

    def test_prefix_capped_at_four(self) -> None:
        """Test only four prefix characters count toward the boost."""
        # jaro 11/12 with a 7 character common prefix
        assert similarity("abcdefgh", "abcdefgz") == pytest.approx(0.95)

    def test_identity(self) -> None:
        """Test identical strings score 1.0."""
        assert similarity("kubectl", "kubectl") == 1.0

    def test_case_insensitive(self) -> None:
        """Test comparison ignores case."""
        assert similarity("Hello", "hELLO") == 1.0

    def test_both_empty(self) -> None:
        """Test two empty strings are identical."""
        assert similarity("", "") == 1.0

    def test_one_empty(self) -> None:
        """Test an empty string against a non-empty one."""
        assert similarity("", "x") == 0.0
        assert similarity("x", "") == 0.0

    def test_single_characters(self) -> None:
        """Test a zero match distance still compares position zero."""
        assert similarity("a", "a") == 1.0
        assert similarity("a", "b") == 0.0

    @pytest.mark.parametrize("a,b", [
        ("gti", "git"),
        ("wimich", "witch"),
        ("martha", "marhta"),
        ("dixon", "dicksonx"),
        ("", "ls"),
    ])
    def test_symmetry(self, a: str, b: str) -> None:
        """Test score(a, b) == score(b, a)."""
        assert similarity(a, b) == similarity(b, a)

    @pytest.mark.parametrize("a,b", [
        ("gti", "git"),
        ("aaaa", "a"),
        ("python", "pythonpythonpython"),
        ("abcd", "abcd"),
        ("zz", "docker-compose"),
    ])
    def test_bounds(self, a: str, b: str) -> None:
        """Test scores stay within [0, 1]."""
        assert 0.0 <= similarity(a, b) <= 1.0


class TestConcurrentMatching:
    """Test split match discovery matches the sequential scan."""

    @pytest.mark.parametrize("a,b", [
        ("the_quick_brown_fox_jumps", "teh_quikc_brwon_fox_jumsp_over"),
        ("aaaaaaaaaaaaaaaaaaaaaaaaaaaa", "aaaaaaaaaaaaaaaaaaaaaaaaa"),
        ("x86_64-linux-gnu-gcc-12-extra", "x86_64-linux-gnu-g++-12-extra"),
    ])
    @pytest.mark.parametrize("workers", [2, 3, 8])
    def test_matches_sequential(self, a: str, b: str, workers: int) -> None:
        """Test concurrent and sequential results are identical."""
        with ScoringStrategy(ConcurrencyMode.CONCURRENT, max_workers=workers) as strategy:
            assert similarity(a, b, strategy) == similarity(a, b)

    def test_auto_mode_threshold(self) -> None:
        """Test AUTO mode only fans out when both inputs are long."""
        strategy = ScoringStrategy(ConcurrencyMode.AUTO, max_workers=4)

        assert strategy.should_fan_out(21, 25, 20) is True
        assert strategy.should_fan_out(21, 20, 20) is False


class TestJaroWinklerMetric:
    """Test the metric class."""

    def test_name(self) -> None:
        """Test metric name."""
        assert JaroWinkler().name == "jaro_winkler"

    def test_ignores_substitution_cost(self) -> None:
        """Test substitution cost has no effect."""
        metric = JaroWinkler()

        assert metric.score("gti", "git", substitution_cost=5.0) == metric.score("gti", "git")
