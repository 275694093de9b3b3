"""Tests for name-based easing lookup."""

import logging

import pytest

import ezing
from ezing import (
    EASINGS,
    FAMILIES,
    FAMILY_NAMES,
    VARIANTS,
    UnknownEasingError,
    get_easing,
    get_family,
)


class TestEasingsDict:
    """Test EASINGS dictionary completeness."""

    def test_easings_has_thirty_one_entries(self):
        """Linear plus three variants of ten families."""
        assert len(EASINGS) == 31

    def test_linear_comes_first(self):
        assert next(iter(EASINGS)) == "linear"

    def test_easings_contains_every_family_variant(self):
        expected = {"linear"} | {f"{f}_{v}" for f in FAMILY_NAMES for v in VARIANTS}
        assert set(EASINGS) == expected

    def test_easings_values_are_callable(self):
        """All EASINGS values should be callable functions."""
        for name, func in EASINGS.items():
            assert callable(func), f"{name} is not callable"

    def test_easings_are_module_functions(self):
        """Every name resolves to the function of the same name on the package."""
        for name, func in EASINGS.items():
            assert getattr(ezing, name) is func
            assert func.__name__ == name


class TestFamilies:
    """Test FAMILIES triples."""

    def test_family_order(self):
        assert list(FAMILIES) == [
            "quad",
            "cubic",
            "quart",
            "quint",
            "sine",
            "circ",
            "expo",
            "elastic",
            "back",
            "bounce",
        ]

    def test_family_triples_are_in_out_inout(self):
        for family, (fin, fout, finout) in FAMILIES.items():
            assert fin.__name__ == f"{family}_in"
            assert fout.__name__ == f"{family}_out"
            assert finout.__name__ == f"{family}_inout"


class TestLookup:
    """Test get_easing and get_family."""

    def test_get_easing_by_name(self):
        assert get_easing("bounce_out") is ezing.bounce_out

    def test_get_easing_ignores_case_and_whitespace(self):
        assert get_easing("  Quad_In ") is ezing.quad_in

    def test_get_easing_unknown_raises(self):
        with pytest.raises(UnknownEasingError) as excinfo:
            get_easing("wobble_in")
        assert excinfo.value.name == "wobble_in"

    def test_unknown_easing_is_a_key_error(self):
        with pytest.raises(KeyError):
            get_easing("nope")

    def test_get_family(self):
        assert get_family("expo") == (ezing.expo_in, ezing.expo_out, ezing.expo_inout)

    def test_get_family_rejects_variant_name(self):
        with pytest.raises(UnknownEasingError, match="unknown easing family"):
            get_family("expo_in")

    def test_failed_lookup_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="ezing.registry"):
            with pytest.raises(UnknownEasingError):
                get_easing("zigzag")
        assert "zigzag" in caplog.text
