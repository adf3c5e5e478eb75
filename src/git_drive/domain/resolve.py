"""Resolve a user-supplied query to a stored navigator.

Two passes, in order:

1. Exact: aliases equal to the query character for character.
2. Fuzzy (only when the exact pass found nothing): both sides are NFD
   normalized, case folded and stripped of non-ASCII code points; a
   navigator matches when its folded alias starts with the folded query.

INVARIANT: the fuzzy pass never picks a winner among ties.  Two or more
candidates always raise :class:`AmbiguousQueryError`.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable, Sequence

from git_drive.domain.models import Navigator
from git_drive.errors import AmbiguousQueryError, NavigatorNotFoundError


def fold_alias(text: str) -> str:
    """Fold *text* for fuzzy comparison.

    Decomposes (NFD), case folds, and drops every non-ASCII code point,
    so ``"Sören"`` folds to ``"soren"``.
    """
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed.casefold() if ch.isascii())


def _single(query: str, matches: list[Navigator]) -> Navigator | None:
    if not matches:
        return None
    if len(matches) > 1:
        raise AmbiguousQueryError(query, [nav.alias for nav in matches])
    return matches[0]


def resolve(query: str, navigators: Sequence[Navigator]) -> Navigator:
    """Return the single navigator identified by *query*.

    Raises:
        NavigatorNotFoundError: Neither pass found a candidate.
        AmbiguousQueryError: A pass found more than one candidate.
    """
    exact = [nav for nav in navigators if nav.alias == query]
    found = _single(query, exact)
    if found is not None:
        return found

    folded_query = fold_alias(query)
    fuzzy = [nav for nav in navigators if fold_alias(nav.alias).startswith(folded_query)]
    found = _single(query, fuzzy)
    if found is not None:
        return found

    raise NavigatorNotFoundError(query)


def resolve_all(queries: Iterable[str], navigators: Sequence[Navigator]) -> list[Navigator]:
    """Resolve each query in order, failing on the first unresolvable one."""
    return [resolve(query, navigators) for query in queries]
