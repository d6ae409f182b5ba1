"""Tests for the collaborator model types."""

import pytest

from stylesig.model import SName, Stereostyles, Stereotype, Style, Url
from stylesig.signature import Signature


class TestStereotypeParse:
    def test_labels_and_style_names(self):
        stereo = Stereotype.parse("<<Foo>> <<$bar>>")
        assert stereo.labels == ("Foo",)
        assert stereo.style_names == ("bar",)

    def test_several_style_names_in_one_entry(self):
        stereo = Stereotype.parse("<<$a b>><<$c>>")
        assert stereo.style_names == ("a", "b", "c")

    def test_empty_entries_ignored(self):
        assert Stereotype.parse("<<>> plain text") == Stereotype()

    def test_multiple_labels_in_selector_form(self):
        stereo = Stereotype.parse("<<a b>><<c>>")
        assert stereo.multiple_labels == (".a", ".b", ".c")

    def test_str(self):
        assert str(Stereotype(labels=("Foo",), style_names=("bar",))) == "<<Foo>><<$bar>>"

    def test_stereostyles(self):
        assert Stereotype.parse("<<$x>>").stereostyles == Stereostyles(("x",))
        assert Stereotype.parse("<<x>>").stereostyles.is_empty


class TestStyle:
    def test_value_lookup_is_case_insensitive(self):
        style = Style(Signature.of("root"), {"fontsize": "12"})
        assert style.value("FontSize") == "12"
        assert style.value("missing", "x") == "x"

    def test_merge_with_overrides(self):
        a = Style(Signature.of("a"), {"fontsize": "12", "fontcolor": "red"})
        b = Style(Signature.of("b"), {"fontsize": "14"})
        merged = a.merge_with(b)
        assert merged.properties == {"fontsize": "14", "fontcolor": "red"}
        assert merged.signature == Signature.of("a", "b")


class TestUrl:
    def test_requires_url(self):
        with pytest.raises(ValueError):
            Url("")


class TestSName:
    def test_adds_normalized_name(self):
        assert Signature.empty().add(SName.SEQUENCE_DIAGRAM).tokens == ("sequencediagram",)
