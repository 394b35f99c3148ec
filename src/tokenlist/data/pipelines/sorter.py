from typing import Iterable, List

from ..models import Token


def sort_tokens(tokens: Iterable[Token]) -> List[Token]:
    """Most-traded tokens first, ties broken by address; pairs ordered by base.

    Returns new Token objects, the input is left untouched.
    """
    ordered = [
        t.model_copy(update={"pairs": sorted(t.pairs, key=lambda p: p.base)})
        for t in tokens
    ]
    ordered.sort(key=lambda t: (-len(t.pairs), t.address))
    return ordered


def count_total_pairs(tokens: Iterable[Token]) -> int:
    return sum(len(t.pairs) for t in tokens)
