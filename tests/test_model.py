# test_model.py

import pytest

from colordinate.attributes import HIGHLIGHT_ATTRS
from colordinate.errors import ValidationError
from colordinate.model import Color, ConfigModel, GroupConfig, parse


class TestParse:
    """Test suite for parsing and validating highlight documents."""

    def test_parse_full_record(self):
        """Test that every recognized field is read."""
        model = parse(
            "Comment:\n"
            "  color:\n"
            "    fg: '#888888'\n"
            "  style: [italic]\n"
            "  links: [SpecialComment]\n"
        )
        conf = model["Comment"]
        assert conf.color == Color(fg="#888888", bg=None)
        assert conf.style == ["italic"]
        assert conf.links == ["SpecialComment"]
        assert conf.extra == {}

    def test_absent_fields_stay_none(self):
        model = parse("Normal: {}")
        assert model["Normal"] == GroupConfig()

    def test_group_order_is_kept(self):
        model = parse("B: {}\nA: {}\nC: {}\n")
        assert list(model) == ["B", "A", "C"]

    def test_style_is_normalized_to_enumeration_order(self):
        model = parse("Title:\n  style: [underline, bold, underline]\n")
        assert model["Title"].style == ["bold", "underline"]

    def test_unknown_fields_are_preserved(self):
        model = parse("Normal:\n  note: keep me\n  color: {}\n")
        assert model["Normal"].extra == {"note": "keep me"}
        assert model["Normal"].color == Color()

    def test_non_string_names_are_stringified(self):
        model = parse("1:\n  color: {fg: '12'}\n")
        assert model["1"].color.fg == "12"

    def test_null_color_sides_are_absent(self):
        model = parse("Normal:\n  color: {fg: ~, bg: black}\n")
        assert model["Normal"].color == Color(fg=None, bg="black")


class TestValidationErrors:
    """Test suite for documents the validator must reject."""

    def test_bogus_attribute(self):
        """Test rejection naming the token and listing every attribute."""
        with pytest.raises(ValidationError) as excinfo:
            parse("Normal:\n  style: [bogus]\n")
        message = str(excinfo.value)
        assert "bogus" in message
        for attr in HIGHLIGHT_ATTRS:
            assert attr in message
        assert excinfo.value.key == "Normal.style"
        assert excinfo.value.allowed == HIGHLIGHT_ATTRS

    def test_style_must_be_a_list(self):
        with pytest.raises(ValidationError) as excinfo:
            parse("Normal:\n  style: bold\n")
        assert excinfo.value.key == "Normal.style"

    def test_color_must_be_a_mapping(self):
        with pytest.raises(ValidationError) as excinfo:
            parse("Normal:\n  color: red\n")
        assert excinfo.value.key == "Normal.color"

    def test_links_must_hold_strings(self):
        with pytest.raises(ValidationError) as excinfo:
            parse("Normal:\n  links: [Visual, 3]\n")
        assert excinfo.value.key == "Normal.links"

    def test_links_must_be_a_list(self):
        with pytest.raises(ValidationError):
            parse("Normal:\n  links: Visual\n")

    def test_group_cannot_link_to_itself(self):
        with pytest.raises(ValidationError):
            parse("Normal:\n  links: [Normal]\n")

    def test_alias_claimed_by_two_groups(self):
        with pytest.raises(ValidationError) as excinfo:
            parse("A:\n  links: [X]\nB:\n  links: [X]\n")
        assert "'X'" in str(excinfo.value)
        assert excinfo.value.key == "B.links"

    @pytest.mark.parametrize("text", ["", "- Normal\n", "just text", "42"])
    def test_root_must_be_a_mapping(self, text):
        with pytest.raises(ValidationError) as excinfo:
            parse(text)
        assert excinfo.value.key == "<document>"

    def test_group_value_must_be_a_mapping(self):
        with pytest.raises(ValidationError) as excinfo:
            parse("Normal: red\n")
        assert excinfo.value.key == "Normal"

    def test_duplicate_group_after_name_conversion(self):
        """Test that keys collapsing to one name are rejected, not merged."""
        with pytest.raises(ValidationError) as excinfo:
            parse("1:\n  color: {fg: red}\n'1':\n  style: [bold]\n")
        assert excinfo.value.key == "1"
        assert "Duplicate" in str(excinfo.value)

    @pytest.mark.parametrize("value", ["off", "12", "0x10", "yes"])
    def test_color_must_be_a_string(self, value):
        with pytest.raises(ValidationError) as excinfo:
            parse(f"Normal:\n  color: {{fg: {value}}}\n")
        assert excinfo.value.key == "Normal.color.fg"

    def test_quoted_color_keywords_are_kept(self):
        model = parse("Normal:\n  color: {fg: 'off', bg: '0x10'}\n")
        assert model["Normal"].color == Color(fg="off", bg="0x10")

    def test_invalid_yaml(self):
        with pytest.raises(ValidationError):
            parse("Normal: [unclosed\n")

    def test_fails_fast_on_first_violation(self):
        """Test that the first bad group in document order is reported."""
        with pytest.raises(ValidationError) as excinfo:
            parse("A:\n  color: 1\nB:\n  style: [bogus]\n")
        assert excinfo.value.key == "A.color"


class TestConfigModel:

    def test_mapping_helpers(self):
        model = ConfigModel({"Normal": GroupConfig()})
        assert len(model) == 1
        assert "Normal" in model
        assert [name for name, _ in model.items()] == ["Normal"]
