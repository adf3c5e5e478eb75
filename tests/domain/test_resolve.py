"""Tests for navigator query resolution."""

from __future__ import annotations

import pytest

from tests.conftest import nav
from git_drive.domain.resolve import fold_alias, resolve, resolve_all
from git_drive.errors import AmbiguousQueryError, NavigatorNotFoundError


class TestFoldAlias:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Sören", "soren"),
            ("ÉLODIE", "elodie"),
            ("plain", "plain"),
            ("日本", ""),
            ("Straße", "strasse"),
        ],
    )
    def test_fold(self, text: str, expected: str) -> None:
        assert fold_alias(text) == expected


class TestResolve:
    def test_exact_match_wins_over_prefix(self) -> None:
        navigators = [nav("nav1"), nav("nav10")]
        assert resolve("nav1", navigators).alias == "nav1"

    def test_unique_prefix(self) -> None:
        navigators = [nav("nav1"), nav("nav10")]
        assert resolve("nav10", navigators).alias == "nav10"

    def test_fuzzy_prefix(self) -> None:
        navigators = [nav("jane"), nav("joe")]
        assert resolve("ja", navigators).alias == "jane"

    def test_fuzzy_ignores_case_and_accents(self) -> None:
        navigators = [nav("Sören"), nav("joe")]
        assert resolve("SOR", navigators).alias == "Sören"

    def test_ambiguous_prefix(self) -> None:
        navigators = [nav("nav1"), nav("nav10")]
        with pytest.raises(AmbiguousQueryError) as exc_info:
            resolve("nav", navigators)
        assert exc_info.value.candidates == ["nav1", "nav10"]
        assert exc_info.value.code == "AMBIGUOUS"

    def test_folding_collision_is_ambiguous(self) -> None:
        navigators = [nav("Soren"), nav("soren2")]
        with pytest.raises(AmbiguousQueryError) as exc_info:
            resolve("sören", navigators)
        assert exc_info.value.candidates == ["Soren", "soren2"]

    def test_duplicate_exact_aliases_are_ambiguous(self) -> None:
        navigators = [nav("a", name="First"), nav("a", name="Second")]
        with pytest.raises(AmbiguousQueryError):
            resolve("a", navigators)

    def test_not_found(self) -> None:
        with pytest.raises(NavigatorNotFoundError, match="No navigator found for `zed`"):
            resolve("zed", [nav("nav1")])

    def test_empty_registry(self) -> None:
        with pytest.raises(NavigatorNotFoundError):
            resolve("nav1", [])

    def test_error_message_lists_candidates(self) -> None:
        with pytest.raises(AmbiguousQueryError) as exc_info:
            resolve("n", [nav("nav1"), nav("nav2")])
        assert str(exc_info.value) == (
            "The query `n` is ambiguous, possible candidates: [nav1, nav2]"
        )


class TestResolveAll:
    def test_preserves_query_order(self) -> None:
        navigators = [nav("jane"), nav("joe")]
        assert [n.alias for n in resolve_all(["joe", "ja"], navigators)] == ["joe", "jane"]

    def test_fails_on_first_bad_query(self) -> None:
        with pytest.raises(NavigatorNotFoundError) as exc_info:
            resolve_all(["jane", "nobody", "j"], [nav("jane"), nav("joe")])
        assert exc_info.value.query == "nobody"
