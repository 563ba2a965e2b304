"""Tests for choosing between highlight snippets and stored values."""

import pytest

from dromedary.highlight import (
    SolrDocument, as_list, highlighted_official_headword, highlighted_other_spellings,
    hl_field,
)


class TestHlField:

    def test_highlights_win(self):
        doc = SolrDocument({"headword": ["worde"]}, {"headword": ["<em>worde</em>"]})
        assert hl_field(doc, "headword") == ["<em>worde</em>"]

    def test_highlights_keep_order_and_duplicates(self):
        snippets = ["<em>b</em>", "a", "<em>b</em>"]
        doc = SolrDocument({}, {"headword": snippets})
        assert hl_field(doc, "headword") == snippets

    def test_falls_back_to_stored_values(self):
        doc = SolrDocument({"headword": ["worde", "word"]}, {"official_headword": ["x"]})
        assert hl_field(doc, "headword") == ["worde", "word"]

    def test_scalar_value_is_wrapped(self):
        assert hl_field(SolrDocument({"official_headword": "worde"}), "official_headword") == ["worde"]

    def test_highlight_string_is_not_split(self):
        doc = SolrDocument({}, {"official_headword": "<em>worde</em>"})
        assert doc.highlight_field("official_headword") == ["<em>worde</em>"]
        assert highlighted_official_headword(doc) == "<em>worde</em>"

    def test_stored_none_is_empty(self):
        assert hl_field(SolrDocument({"headword": None}), "headword") == []

    def test_missing_field_is_empty(self):
        assert hl_field(SolrDocument({}), "headword") == []

    def test_as_list(self):
        assert as_list(None) == []
        assert as_list(("a", "b")) == ["a", "b"]
        assert as_list("a") == ["a"]


class TestHeadwords:

    def test_highlighted_headword_and_other_spellings(self):
        doc = SolrDocument({}, {
            "official_headword": ["<em>worde</em>"],
            "headword": ["<em>worde</em>", "worden"],
        })
        assert highlighted_official_headword(doc) == "<em>worde</em>"
        assert highlighted_other_spellings(doc) == ["worden"]

    def test_all_occurrences_of_headword_are_removed(self):
        doc = SolrDocument({"official_headword": ["worde"],
                            "headword": ["worde", "word", "worde", "wurde"]})
        assert highlighted_other_spellings(doc) == ["word", "wurde"]

    def test_no_official_headword(self):
        doc = SolrDocument({"headword": ["worde", "word"]})
        assert highlighted_official_headword(doc) is None
        assert highlighted_other_spellings(doc) == ["worde", "word"]

    @pytest.mark.parametrize("fields,highlighting", [
        ({}, None),
        ({"official_headword": "a", "headword": ["a", "a"]}, None),
        ({"official_headword": ["a"], "headword": ["b"]}, {"headword": ["<em>a</em>", "a"]}),
        ({"headword": ["a", "b"]}, {"official_headword": ["<em>b</em>"], "headword": ["<em>b</em>", "a"]}),
        ({"official_headword": [], "headword": ["a"]}, None),
    ])
    def test_other_spellings_never_contain_headword(self, fields, highlighting):
        doc = SolrDocument(fields, highlighting)
        official = highlighted_official_headword(doc)
        assert official not in highlighted_other_spellings(doc)


class TestSolrDocument:

    def test_fetch(self):
        doc = SolrDocument({"id": "MED1", "pos": "n"})
        assert doc.id == "MED1"
        assert doc.fetch("pos") == "n"
        assert doc.fetch("missing", "x") == "x"
        assert doc.get("missing") is None
        with pytest.raises(KeyError):
            doc.fetch("missing")

    def test_from_response_pairs_highlighting(self):
        response = {
            "response": {"docs": [{"id": "MED1"}, {"id": "MED2"}]},
            "highlighting": {"MED2": {"headword": ["<em>w</em>"]}},
        }
        docs = SolrDocument.from_response(response)
        assert [d.id for d in docs] == ["MED1", "MED2"]
        assert not docs[0].has_highlight_field("headword")
        assert docs[1].highlight_field("headword") == ["<em>w</em>"]

    def test_from_response_without_docs(self):
        assert SolrDocument.from_response({}) == []
