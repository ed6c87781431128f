"""
Tests for the GameValue construction and query API.
"""

import pytest

from game_values import (
    GameContext,
    GameValue,
    get_default_context,
    make,
    render,
    set_default_context,
)


class TestConstruction:
    """make() and the factories."""

    def test_zero(self, context):
        """0 has no options and the label '0'."""
        zero = GameValue.zero(context)
        assert zero.left_options == ()
        assert zero.right_options == ()
        assert zero.label == "0"
        assert zero.context is context

    def test_options_round_trip(self, games):
        """Options come back as handles on the same nodes."""
        one = games["one"]
        assert len(one.left_options) == 1
        assert one.left_options[0].is_identical(games["zero"])
        assert one.right_options == ()

    def test_options_unlabelled(self, games):
        """Option handles carry no label."""
        assert games["fuzzy"].left_options[0].label == ""

    def test_context_from_options(self, context):
        """Without an explicit context the options' context is used."""
        zero = GameValue.zero(context)
        assert make([zero], []).context is context
        assert make([], [zero]).context is context

    def test_non_value_option_rejected(self, games):
        """Options must be GameValue instances."""
        with pytest.raises(TypeError):
            make([games["zero"], 1], [])
        with pytest.raises(TypeError):
            make([], [games["zero"].node])

    def test_mixed_contexts_rejected(self, games):
        """Construction, ordering and arithmetic refuse a foreign context."""
        other = GameValue.zero(GameContext())
        with pytest.raises(ValueError):
            make([games["zero"], other], [])
        with pytest.raises(ValueError):
            make([games["zero"]], [], context=GameContext())
        with pytest.raises(ValueError):
            games["one"] + other
        with pytest.raises(ValueError):
            games["one"] <= other
        with pytest.raises(ValueError):
            games["one"] < other

    def test_negative_nimber_rejected(self, context):
        """Heap sizes start at zero."""
        with pytest.raises(ValueError):
            GameValue.nimber(-1, context)

    def test_integer_zero(self, context):
        """integer(0) is the zero node."""
        assert GameValue.integer(0, context).is_identical(GameValue.zero(context))

    def test_nimber_labels(self, context):
        """*1 is labelled '*', larger heaps '*n'."""
        assert GameValue.nimber(1, context).label == "*"
        assert GameValue.nimber(3, context).label == "*3"

    def test_nimber_options(self, context):
        """*3 has 0, * and *2 on both sides."""
        star3 = GameValue.nimber(3, context)
        assert len(star3.left_options) == 3
        assert len(star3.right_options) == 3


class TestHandleSemantics:
    """Handles are immutable and deliberately unhashable."""

    def test_frozen(self, games):
        """Fields cannot be reassigned."""
        with pytest.raises(AttributeError):
            games["one"].label = "uno"

    def test_unhashable(self, games):
        """Game equality is not structural, so no hash."""
        with pytest.raises(TypeError):
            hash(games["one"])

    def test_node_is_hashable_identity(self, games):
        """Nodes serve as identity keys."""
        table = {games["one"].node: "one"}
        assert table[games["up"].node] == "one"

    def test_digest_matches_node(self, games):
        """digest is the node's digest."""
        assert games["star"].digest == games["star"].node.digest
        assert games["one"].digest != games["minus_one"].digest

    def test_foreign_operands(self, games):
        """Non-GameValue operands are not supported."""
        one = games["one"]
        assert (one == 1) is False
        assert (one != "x") is True
        with pytest.raises(TypeError):
            one + 1
        with pytest.raises(TypeError):
            one - 1
        with pytest.raises(TypeError):
            one < 1

    def test_equality_across_contexts(self, games):
        """Values of another context compare unequal instead of raising."""
        zero = games["zero"]
        other = GameValue.zero(GameContext())
        assert (zero == other) is False
        assert (zero != other) is True
        assert zero not in [other]
        assert [other, zero].index(zero) == 1
        assert [other, other].count(zero) == 0

    def test_list_remove_across_contexts(self, games):
        """list.remove skips values of another context."""
        zero = games["zero"]
        other = GameValue.zero(GameContext())
        values = [other, zero]
        values.remove(zero)
        assert len(values) == 1
        assert values[0] is other


class TestRendering:
    """{L|R} diagnostics."""

    def test_basic_forms(self, games):
        """0, 1, -1 and * render in {L|R} form."""
        assert str(games["zero"]) == "{|}"
        assert str(games["one"]) == "{{|}|}"
        assert str(games["minus_one"]) == "{|{|}}"
        assert str(games["star"]) == "{{|}|{|}}"

    def test_render_node(self, games):
        """render() on a node matches str() on the value."""
        assert render(games["star"].node) == str(games["star"])

    def test_repr(self, games):
        """repr shows the label when there is one."""
        assert repr(games["one"]) == "GameValue('1', {{|}|})"
        assert repr(make([games["zero"]], [])) == "GameValue({{|}|})"

    def test_labels_not_rendered(self, games):
        """Rendering is purely structural."""
        assert str(games["one"]) == str(games["up"])

    def test_shared_options_rendered_each_time(self, games):
        """A repeated sub-position appears once per occurrence."""
        assert str(games["fuzzy"]) == "{{{|}|}|{|{|}}}"

    def test_tall_tree(self, context):
        """integer(500) renders without recursion."""
        text = str(GameValue.integer(500, context))
        assert text == "{" * 501 + "|}" * 501


class TestDefaultContext:
    """Process-wide context used when none is given."""

    def test_default_used(self):
        """Values built without a context share the default one."""
        previous = get_default_context()
        try:
            set_default_context(None)
            zero = GameValue.zero()
            assert zero.context is get_default_context()
            assert zero.context is not previous
            assert make([zero], []) > zero
        finally:
            set_default_context(previous)

    def test_explicit_context_isolated(self, context):
        """An explicit context is never the default."""
        assert GameValue.zero(context).context is not get_default_context()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
