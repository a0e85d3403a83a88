"""Tests for src/normalize.py — per-field decoding and fallbacks."""

import pytest

from normalize import (
    FieldShape,
    article_icon,
    classify,
    extract_tags,
    format_authors,
    format_date,
    parse_date,
    published_label,
    resolve_title,
)

NA = "Not available"


class TestClassify:
    @pytest.mark.parametrize("value, shape", [
        (None, FieldShape.ABSENT),
        ("", FieldShape.ABSENT),
        ("  ", FieldShape.ABSENT),
        (False, FieldShape.ABSENT),
        ("x", FieldShape.SCALAR),
        (3, FieldShape.SCALAR),
        ({}, FieldShape.OBJECT),
        ([], FieldShape.COLLECTION),
        ((1,), FieldShape.COLLECTION),
        (object(), FieldShape.ABSENT),
    ])
    def test_shapes(self, value, shape):
        assert classify(value) is shape


class TestFormatAuthors:
    def test_mixed_list(self):
        assert format_authors([{"nome": "Ana Silva"}, "José Costa"], NA) == "Ana Silva, José Costa"

    def test_single_string(self):
        assert format_authors("  Ana Silva ", NA) == "Ana Silva"

    def test_object_with_nome(self):
        assert format_authors({"nome": "Ana"}, NA) == "Ana"

    def test_object_falls_back_to_name(self):
        assert format_authors({"name": "Rui"}, NA) == "Rui"

    def test_nome_takes_priority(self):
        assert format_authors({"nome": "Ana", "name": "Other"}, NA) == "Ana"

    def test_unresolved_entries_dropped(self):
        authors = [{"id": 1}, None, "", 7, {"nome": "Ana"}, {"name": "Rui"}]
        assert format_authors(authors, NA) == "Ana, Rui"

    @pytest.mark.parametrize("value", [None, "", [], [{}], {"id": 3}, 42, True])
    def test_fallback(self, value):
        assert format_authors(value, NA) == NA

    def test_custom_separator(self):
        assert format_authors(["A", "B"], NA, separator=" & ") == "A & B"


class TestExtractTags:
    def test_string(self):
        assert extract_tags("Política", 6) == ["Política"]

    def test_list_of_strings(self):
        assert extract_tags(["a", "b"], 6) == ["a", "b"]

    def test_tag_objects_resolve_in_priority_order(self):
        tags = [{"nome": "A"}, {"name": "B"}, {"value": "C"}, {"titulo": "D"}, {"title": "E"}]
        assert extract_tags(tags, 6) == ["A", "B", "C", "D", "E"]

    def test_filters_junk(self):
        tags = ["undefined", "null", "[object Object]", "None", "", {}, {"id": 4}, None, "ok"]
        assert extract_tags(tags, 6) == ["ok"]

    def test_caps_at_limit_preserving_order(self):
        tags = [f"t{i}" for i in range(10)]
        assert extract_tags(tags, 6) == ["t0", "t1", "t2", "t3", "t4", "t5"]

    def test_duplicates_kept(self):
        assert extract_tags(["a", "a"], 6) == ["a", "a"]

    def test_numbers_stringified(self):
        assert extract_tags([2024], 6) == ["2024"]

    @pytest.mark.parametrize("value", [None, "", [], True])
    def test_empty(self, value):
        assert extract_tags(value, 6) == []

    @pytest.mark.parametrize("value", [
        ["undefined"] * 3 + [{"nome": None}] + [f"x{i}" for i in range(9)],
        [{"nome": {"nested": 1}}, [1, 2], {"title": "null"}],
        "null",
    ])
    def test_never_exceeds_cap_or_leaks_placeholders(self, value):
        tags = extract_tags(value, 6)
        assert len(tags) <= 6
        assert not {"undefined", "null", "[object Object]"} & set(tags)


class TestArticleIcon:
    def test_string_media(self):
        icon = article_icon({"multimediaPrincipal": "https://img/a.jpg"}, "T", "#1E90FF", "P")
        assert icon.source == "https://img/a.jpg"
        assert icon.text is None

    def test_object_media(self):
        icon = article_icon({"multimediaPrincipal": {"src": "https://img/b.jpg"}}, "T", "#1E90FF", "P")
        assert icon.source == "https://img/b.jpg"

    def test_secondary_image(self):
        raw = {"multimediaPrincipal": {"alt": "x"}, "imagem": {"src": "https://img/c.jpg"}}
        assert article_icon(raw, "T", "#1E90FF", "P").source == "https://img/c.jpg"

    def test_letter_fallback_uses_stripped_title(self):
        icon = article_icon({}, "<b>governo</b> aprova", "#1E90FF", "P")
        assert icon.source is None
        assert icon.text == "G"
        assert icon.tint_color == "#1E90FF"

    def test_placeholder_when_no_title(self):
        icon = article_icon({"imagem": "not-an-object"}, "", "#1E90FF", "P")
        assert icon.text == "P"


class TestDates:
    def test_parse_iso_with_z(self):
        dt = parse_date("2024-05-10T14:30:00Z")
        assert (dt.year, dt.month, dt.day, dt.hour) == (2024, 5, 10, 14)

    def test_parse_epoch_seconds_and_millis(self):
        assert parse_date(1715351400).year == 2024
        assert parse_date(1715351400000).year == 2024
        assert parse_date("1715351400").year == 2024

    @pytest.mark.parametrize("value", ["ontem", None, True, {}, "2024-13-45"])
    def test_parse_invalid(self, value):
        assert parse_date(value) is None

    @pytest.mark.parametrize("value", [10 ** 400, -(10 ** 400), float("inf"), "²", "١٢٣"])
    def test_parse_unrepresentable_values(self, value):
        assert parse_date(value) is None

    def test_format_date_pt(self):
        assert format_date("2024-05-10T14:30:00") == "10 de maio de 2024, 14:30"

    def test_published_label_uses_data(self):
        assert published_label({"data": "2024-03-01T09:05:00"}, NA, "0001-01-01") == "1 de março de 2024, 09:05"

    def test_zero_date_sentinel(self):
        assert published_label({"data": "0001-01-01T00:00:00"}, NA, "0001-01-01") == NA

    def test_falls_back_to_time(self):
        label = published_label({"time": "2024-12-25T20:00:00"}, NA, "0001-01-01")
        assert label == "25 de dezembro de 2024, 20:00"

    def test_absent(self):
        assert published_label({}, NA, "0001-01-01") == NA

    def test_unparsable(self):
        assert published_label({"data": "ontem"}, NA, "0001-01-01") == NA


class TestResolveTitle:
    def test_strips_markup(self):
        assert resolve_title({"titulo": "<i>Olá</i> mundo"}, "Untitled") == "Olá mundo"

    def test_caller_fallback(self):
        assert resolve_title({}, "Untitled", "Do link") == "Do link"

    def test_untitled(self):
        assert resolve_title({"titulo": "<br>"}, "Untitled") == "Untitled"
