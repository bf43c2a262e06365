"""Tests for the rule model and the logical property capability table."""

import pytest

from legacy_logical.model.rules import Arity, Distributed, Whole
from legacy_logical.table import LOGICAL_PROPERTIES, lookup, supported_properties


# ---------------------------------------------------------------------------
# Rule model
# ---------------------------------------------------------------------------


class TestArity:
    @pytest.mark.parametrize("count, arity", [(1, Arity.ONE), (2, Arity.TWO), (4, Arity.FOUR)])
    def test_valid_counts(self, count, arity):
        assert Arity.of(count) is arity

    @pytest.mark.parametrize("count", [0, 3, 5])
    def test_invalid_counts(self, count):
        with pytest.raises(ValueError, match="1, 2 or 4"):
            Arity.of(count)


class TestRules:
    def test_targets_become_tuple(self):
        rule = Distributed(["top", "bottom"])
        assert rule.targets == ("top", "bottom")
        assert rule.arity is Arity.TWO

    def test_three_targets_rejected(self):
        with pytest.raises(ValueError):
            Distributed(("top", "right", "bottom"))

    def test_empty_targets_rejected(self):
        with pytest.raises(ValueError):
            Whole(())

    def test_rule_is_frozen(self):
        rule = Whole(("borderTop",))
        with pytest.raises(AttributeError):
            rule.targets = ("borderBottom",)  # type: ignore[misc]

    def test_variants_are_distinct(self):
        assert Whole(("top",)) != Distributed(("top",))


# ---------------------------------------------------------------------------
# Capability table
# ---------------------------------------------------------------------------


class TestTable:
    def test_size(self):
        assert len(LOGICAL_PROPERTIES) == 47

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            LOGICAL_PROPERTIES["foo"] = Whole(("top",))  # type: ignore[index]

    def test_every_rule_has_valid_arity(self):
        for rule in LOGICAL_PROPERTIES.values():
            assert len(rule.targets) in (1, 2, 4)

    def test_inset(self):
        assert LOGICAL_PROPERTIES["inset"] == Distributed(("top", "right", "bottom", "left"))

    def test_inset_inline(self):
        assert LOGICAL_PROPERTIES["insetInline"] == Distributed(("left", "right"))

    def test_margin_block(self):
        assert LOGICAL_PROPERTIES["marginBlock"] == Distributed(("marginTop", "marginBottom"))

    def test_padding_inline_end(self):
        assert LOGICAL_PROPERTIES["paddingInlineEnd"] == Distributed(("paddingRight",))

    def test_border_shorthands_are_whole(self):
        for name in (
            "borderBlock",
            "borderBlockStart",
            "borderBlockEnd",
            "borderInline",
            "borderInlineStart",
            "borderInlineEnd",
        ):
            assert isinstance(LOGICAL_PROPERTIES[name], Whole), name

    def test_border_inline(self):
        assert LOGICAL_PROPERTIES["borderInline"] == Whole(("borderLeft", "borderRight"))

    def test_border_longhands_are_distributed(self):
        assert LOGICAL_PROPERTIES["borderBlockWidth"] == Distributed(
            ("borderTopWidth", "borderBottomWidth")
        )
        assert LOGICAL_PROPERTIES["borderInlineStartStyle"] == Distributed(("borderLeftStyle",))
        assert LOGICAL_PROPERTIES["borderInlineEndColor"] == Distributed(("borderRightColor",))

    def test_border_radius(self):
        assert LOGICAL_PROPERTIES["borderStartStartRadius"].targets == ("borderTopLeftRadius",)
        assert LOGICAL_PROPERTIES["borderStartEndRadius"].targets == ("borderTopRightRadius",)
        assert LOGICAL_PROPERTIES["borderEndStartRadius"].targets == ("borderBottomLeftRadius",)
        assert LOGICAL_PROPERTIES["borderEndEndRadius"].targets == ("borderBottomRightRadius",)

    def test_physical_names_are_not_logical(self):
        targets = {t for rule in LOGICAL_PROPERTIES.values() for t in rule.targets}
        assert not targets & set(LOGICAL_PROPERTIES)


class TestLookup:
    def test_known(self):
        assert lookup("marginInlineStart") == Distributed(("marginLeft",))

    def test_unknown(self):
        assert lookup("color") is None

    def test_supported_properties_sorted(self):
        names = supported_properties()
        assert names == sorted(names)
        assert "inset" in names
        assert len(names) == 47
