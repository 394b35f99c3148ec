from tokenlist.data.models import Pair, Token
from tokenlist.data.pipelines.sorter import count_total_pairs, sort_tokens


def make_token(address, bases):
    return Token(
        asset=f"c714_t{address}", type="BEP2", address=address, name=address,
        symbol=address, decimals=8, logo_uri="", pairs=[Pair(base=b, lot_size="1", tick_size="1") for b in bases],
    )


class TestSortTokens:
    """Ordering of tokens and their pairs"""

    def test_pair_count_then_address(self):
        tokens = [make_token("b", ["x", "y", "z"]), make_token("a", ["x"]), make_token("c", ["x", "y"])]
        assert [t.address for t in sort_tokens(tokens)] == ["b", "c", "a"]

    def test_address_breaks_ties(self):
        tokens = [make_token("z", ["x"]), make_token("m", ["x"]), make_token("a", [])]
        assert [t.address for t in sort_tokens(tokens)] == ["m", "z", "a"]

    def test_pairs_sorted_by_base(self):
        token = make_token("a", ["c714_tZZZ-1", "c714", "c714_tAAA-1"])
        (result,) = sort_tokens([token])
        assert [p.base for p in result.pairs] == ["c714", "c714_tAAA-1", "c714_tZZZ-1"]

    def test_input_not_mutated(self):
        tokens = [make_token("a", ["y", "x"]), make_token("b", ["x", "y", "z"])]
        sort_tokens(tokens)
        assert [t.address for t in tokens] == ["a", "b"]
        assert [p.base for p in tokens[0].pairs] == ["y", "x"]

    def test_empty(self):
        assert sort_tokens([]) == []


def test_count_total_pairs():
    assert count_total_pairs([make_token("a", ["x", "y"]), make_token("b", ["x"]), make_token("c", [])]) == 3
