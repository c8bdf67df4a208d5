"""Tests for the stylesheet accumulator."""
from __future__ import annotations

import logging
import re
from pathlib import Path

import pytest

from css_creator.config import CssCreatorConfig
from css_creator.errors import ValidationError
from css_creator.generator import CssCreator
from css_creator.model.element import ElementRecord, ElementType
from css_creator.templates.css import PALETTE


@pytest.fixture
def generator(tmp_path):
    return CssCreator(str(tmp_path / "out"))


# ---------------------------------------------------------------------------
# Initialization
# ---------------------------------------------------------------------------


class TestInitialize:
    def test_starts_with_header_only(self, generator):
        assert generator.stylesheet == generator.header
        assert generator.elements == ()

    def test_header_contents(self, generator):
        header = generator.header
        assert re.match(
            r"/\* CSS generated by CSS Creator - \d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} \*/\n",
            header,
        )
        assert ":root {" in header
        assert "--primary-color: #3a86ff;" in header
        assert "* {\n    margin: 0;" in header
        assert "body {" in header

    def test_default_output_dir(self):
        assert CssCreator().output_dir == Path("downloads")

    def test_output_dir_from_config(self):
        creator = CssCreator(config=CssCreatorConfig(output_dir="site/css"))
        assert creator.output_dir == Path("site/css")

    def test_explicit_output_dir_wins(self):
        creator = CssCreator("explicit", config=CssCreatorConfig(output_dir="site/css"))
        assert creator.output_dir == Path("explicit")

    def test_initialize_resets(self, generator):
        generator.add_element("card")
        generator.initialize()
        assert generator.elements == ()
        assert generator.stylesheet == generator.header

    def test_instances_do_not_share_state(self):
        first = CssCreator()
        second = CssCreator()
        first.add_element("button")
        assert second.elements == ()
        assert second.stylesheet == second.header


# ---------------------------------------------------------------------------
# add_element
# ---------------------------------------------------------------------------


class TestAddElement:
    @pytest.mark.parametrize("element_type", [t.value for t in ElementType])
    def test_valid_types_succeed(self, generator, element_type):
        record = generator.add_element(element_type, {})
        assert isinstance(record, ElementRecord)
        assert record.type == element_type
        assert record.css.count(f"#{record.id} {{") == 1
        assert record.id.startswith(f"css_creator_{element_type}_")

    def test_properties_default_to_empty(self, generator):
        record = generator.add_element("card")
        assert record.properties == {}

    def test_record_keeps_properties_copy(self, generator):
        props = {"bg_color": "#000000"}
        record = generator.add_element("button", props)
        props["bg_color"] = "#ffffff"
        assert record.properties == {"bg_color": "#000000"}

    def test_record_is_immutable(self, generator):
        record = generator.add_element("card")
        with pytest.raises(AttributeError):
            record.css = ""  # type: ignore[misc]

    def test_record_properties_are_read_only(self, generator):
        generator.add_element("button", {"bg_color": "#000000"})
        record = generator.elements[0]
        with pytest.raises(TypeError):
            record.properties["bg_color"] = "#ffffff"  # type: ignore[index]
        assert generator.elements[0].properties == {"bg_color": "#000000"}

    def test_to_dict_properties_are_a_copy(self, generator):
        record = generator.add_element("input", {"border_color": "#ddd"})
        data = record.to_dict()
        data["properties"]["border_color"] = "#000"
        assert record.properties == {"border_color": "#ddd"}

    def test_appends_newline_and_css(self, generator):
        before = generator.stylesheet
        record = generator.add_element("input")
        assert generator.stylesheet == before + "\n" + record.css

    def test_stylesheet_matches_records_in_order(self, generator):
        records = [generator.add_element(t) for t in ("button", "input", "card")]
        expected = generator.header + "".join("\n" + r.css for r in records)
        assert generator.stylesheet == expected
        assert list(generator.elements) == records

    def test_block_order_follows_insertion(self, generator):
        button = generator.add_element("button")
        field = generator.add_element("input")
        card = generator.add_element("card")
        text = generator.stylesheet
        assert text.index(f"#{button.id} {{") < text.index(f"#{field.id} {{") < text.index(f"#{card.id} {{")

    def test_same_type_twice_gets_distinct_ids(self, generator):
        first = generator.add_element("button")
        second = generator.add_element("button")
        assert first.id != second.id

    def test_unknown_property_keys_ignored(self, generator):
        record = generator.add_element("card", {"whatever": "}{<script>"})
        assert "whatever" not in record.css
        assert record.properties == {"whatever": "}{<script>"}


class TestAddElementDefaults:
    def test_button_defaults(self, generator):
        record = generator.add_element("button", {})
        assert f"background-color: {PALETTE[0]};" in record.css
        assert "color: #ffffff;" in record.css

    def test_button_custom_background(self, generator):
        record = generator.add_element("button", {"bg_color": "#000000"})
        assert "#000000" in record.css
        assert PALETTE[0] not in record.css


class TestAddElementRejected:
    @pytest.mark.parametrize("element_type", ["carousel", "", "BUTTON", "modal"])
    def test_unknown_type_raises(self, generator, element_type):
        before = generator.stylesheet
        with pytest.raises(ValidationError):
            generator.add_element(element_type, {"bg_color": "#000000"})
        assert generator.stylesheet == before
        assert generator.elements == ()

    def test_rejection_is_logged(self, generator, caplog):
        with caplog.at_level(logging.WARNING, logger="css_creator.generator"):
            with pytest.raises(ValidationError):
                generator.add_element("carousel")
        assert "carousel" in caplog.text

    def test_failed_add_keeps_earlier_elements(self, generator):
        record = generator.add_element("header")
        snapshot = generator.stylesheet
        with pytest.raises(ValidationError):
            generator.add_element("popup")
        assert generator.elements == (record,)
        assert generator.stylesheet == snapshot


class TestPropertyValidation:
    @pytest.fixture
    def strict(self, tmp_path):
        return CssCreator(config=CssCreatorConfig(validate_properties=True))

    def test_lenient_by_default(self, generator):
        record = generator.add_element("button", {"bg_color": "red;}body{x:y"})
        assert "red;}body{x:y" in record.css

    def test_strict_rejects_bad_value(self, strict):
        before = strict.stylesheet
        with pytest.raises(ValidationError) as exc_info:
            strict.add_element("button", {"bg_color": "red;}body{x:y"})
        assert exc_info.value.property_name == "bg_color"
        assert strict.stylesheet == before
        assert strict.elements == ()

    def test_strict_accepts_colors(self, strict):
        record = strict.add_element("button", {"bg_color": "#000", "text_color": "white"})
        assert "background-color: #000;" in record.css

    def test_strict_ignores_unknown_keys(self, strict):
        strict.add_element("card", {"note": "<anything>"})
        assert len(strict.elements) == 1


# ---------------------------------------------------------------------------
# Escaping
# ---------------------------------------------------------------------------


class TestGetCssCode:
    def test_plain_stylesheet_unchanged_except_quotes(self, generator):
        escaped = str(generator.get_css_code())
        assert escaped == generator.stylesheet.replace("'", "&#39;")

    def test_escapes_special_characters_once(self, generator):
        generator.add_element("button", {"bg_color": '<a href="x">&'})
        raw = generator.stylesheet
        escaped = str(generator.get_css_code())
        for char in "<>\"&":
            assert char not in escaped.replace("&amp;", "").replace("&lt;", "").replace(
                "&gt;", ""
            ).replace("&#34;", "").replace("&#39;", "")
        assert escaped.count("&lt;") == raw.count("<")
        assert escaped.count("&gt;") == raw.count(">")
        assert escaped.count("&#34;") == raw.count('"')
        assert escaped.count("&amp;") == raw.count("&")

    def test_does_not_double_escape(self, generator):
        generator.add_element("button", {"bg_color": "&"})
        escaped = str(generator.get_css_code())
        assert "&amp;amp;" not in escaped

    def test_stylesheet_stays_raw(self, generator):
        generator.add_element("button", {"bg_color": "<x>"})
        generator.get_css_code()
        assert "<x>" in generator.stylesheet


# ---------------------------------------------------------------------------
# save_to_file
# ---------------------------------------------------------------------------


class TestSaveToFile:
    def test_creates_directory_and_file(self, tmp_path):
        target = tmp_path / "nested" / "dir"
        creator = CssCreator(str(target))
        creator.add_element("navbar")
        path = creator.save_to_file()
        assert path == target / "generated_styles.css"
        assert path.is_file()

    def test_round_trip_is_raw(self, generator):
        generator.add_element("button", {"bg_color": '"<&>"'})
        path = generator.save_to_file()
        assert path.read_text(encoding="utf-8") == generator.stylesheet

    def test_explicit_directory(self, generator, tmp_path):
        path = generator.save_to_file(tmp_path / "other")
        assert path == tmp_path / "other" / "generated_styles.css"
        assert path.read_text(encoding="utf-8") == generator.stylesheet

    def test_existing_directory(self, tmp_path):
        creator = CssCreator(str(tmp_path))
        path = creator.save_to_file()
        assert path.parent == tmp_path

    def test_custom_filename(self, tmp_path):
        creator = CssCreator(str(tmp_path), config=CssCreatorConfig(css_filename="theme.css"))
        assert creator.save_to_file().name == "theme.css"

    def test_overwrites_previous_save(self, generator):
        generator.save_to_file()
        generator.add_element("footer")
        path = generator.save_to_file()
        assert path.read_text(encoding="utf-8") == generator.stylesheet

    def test_failure_raises_oserror(self, tmp_path, caplog):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("file in the way")
        creator = CssCreator(str(blocker))
        with caplog.at_level(logging.ERROR, logger="css_creator.generator"):
            with pytest.raises(OSError):
                creator.save_to_file()
        assert "Failed to write stylesheet" in caplog.text


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


class TestToDict:
    def test_shape(self, generator):
        record = generator.add_element("button", {"bg_color": "#000000"})
        data = generator.to_dict()
        assert data["stylesheet"] == generator.stylesheet
        assert data["elements"] == [
            {
                "id": record.id,
                "type": "button",
                "properties": {"bg_color": "#000000"},
                "css": record.css,
            }
        ]
