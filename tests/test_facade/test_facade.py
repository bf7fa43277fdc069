"""Tests for the stateless builder facade."""

import pytest

from selectorkit import BuilderConfig, BuilderStateError, CardinalityError, OrderError, SelectorBuilder
from selectorkit import facade as css
from selectorkit.facade import css_selector_builder as builder


# ---------------------------------------------------------------------------
# Factory functions
# ---------------------------------------------------------------------------


class TestFactories:
    def test_each_call_returns_fresh_builder(self):
        first = css.element("a")
        second = css.element("a")
        assert isinstance(first, SelectorBuilder)
        assert first is not second

    def test_seeded_with_one_fragment(self):
        assert css.element("a").stringify() == "a"
        assert css.id("main").stringify() == "#main"
        assert css.class_("box").stringify() == ".box"
        assert css.attr("type=text").stringify() == "[type=text]"
        assert css.pseudo_class("checked").stringify() == ":checked"
        assert css.pseudo_element("selection").stringify() == "::selection"

    def test_facade_calls_do_not_share_state(self):
        css.element("a")
        assert css.element("b").id("x").stringify() == "b#x"

    def test_config_is_passed_through(self):
        lenient = BuilderConfig(strict=False)
        selector = css.id("a", config=lenient)
        assert selector.config is lenient

    def test_errors_propagate_unwrapped(self):
        with pytest.raises(OrderError):
            css.class_("a").id("b")
        with pytest.raises(CardinalityError):
            css.pseudo_element("after").pseudo_element("before")


# ---------------------------------------------------------------------------
# Namespace object
# ---------------------------------------------------------------------------


class TestNamespace:
    def test_id_class_chain(self):
        assert builder.id("main").class_("container").class_("editable").stringify() == (
            "#main.container.editable"
        )

    def test_attr_example(self):
        text = builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        assert text == 'a[href$=".png"]:focus'

    def test_namespace_holds_no_state(self):
        with pytest.raises(AttributeError):
            builder.cache = {}  # type: ignore[attr-defined]


# ---------------------------------------------------------------------------
# combine
# ---------------------------------------------------------------------------


class TestCombine:
    def test_sibling(self):
        text = builder.combine(
            builder.element("div").id("main"),
            "+",
            builder.element("table").id("data"),
        ).stringify()
        assert text == "div#main + table#data"

    def test_nested(self):
        text = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        ).stringify()
        assert text == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_child_with_pseudo_element(self):
        text = css.combine(
            css.element("p").class_("note"),
            ">",
            css.element("span").pseudo_element("first-letter"),
        ).stringify()
        assert text == "p.note > span::first-letter"

    def test_failed_sub_builder_propagates(self):
        bad = css.element("a")
        with pytest.raises(CardinalityError):
            bad.element("b")
        with pytest.raises(BuilderStateError):
            css.combine(bad, ">", css.element("c"))
