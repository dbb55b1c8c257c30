"""
Tests for ontologyinsight.parsers.
"""

import pytest

from ontologyinsight.parsers import (
    BroaderRelation,
    OntologyFormatError,
    extract_term_name,
    iter_broader_relations,
    load_definition_rows,
    normalize_term_name,
    parse_definition_row,
)

PREFIX = "http://www.informea.org/terms/"


class TestExtractTermName:
    def test_strips_prefix(self):
        assert extract_term_name(PREFIX + "climate-change") == "climate-change"

    def test_custom_prefix(self):
        assert extract_term_name("urn:terms:water", prefix="urn:terms:") == "water"

    def test_foreign_uri_raises(self):
        with pytest.raises(OntologyFormatError):
            extract_term_name("http://example.org/terms/water")

    def test_missing_uri_raises(self):
        with pytest.raises(OntologyFormatError):
            extract_term_name(None)


class TestIterBroaderRelations:
    """iter_broader_relations() 的測試。"""

    def test_yields_qualifying_relations(self, sample_ontology):
        relations = list(iter_broader_relations(sample_ontology))

        assert [(r.parent, r.child) for r in relations] == [
            ("environment", "biodiversity"),
            ("biodiversity", "species"),
            ("environment", "climate-change"),
            ("chemicals", "waste"),
        ]
        assert relations[0] == BroaderRelation(
            child="biodiversity",
            child_uri=PREFIX + "biodiversity",
            parent="environment",
            parent_uri=PREFIX + "environment",
        )

    def test_excluded_prefixes_are_configurable(self, sample_ontology):
        relations = list(iter_broader_relations(sample_ontology, {"excluded_term_prefixes": []}))
        assert ("species", "xl_en_species") in [(r.parent, r.child) for r in relations]

    def test_list_broader_uses_first_entry(self):
        data = {
            "Description": [
                {
                    "@about": PREFIX + "water",
                    "broader": [{"@resource": PREFIX + "nature"}, {"@resource": PREFIX + "resources"}],
                }
            ]
        }
        [relation] = iter_broader_relations(data)
        assert relation.parent == "nature"

    def test_empty_parent_raises(self):
        data = {"Description": [{"@about": PREFIX + "water", "broader": {"@resource": PREFIX}}]}
        with pytest.raises(OntologyFormatError):
            list(iter_broader_relations(data))

    def test_broader_without_resource_raises(self):
        data = {"Description": [{"@about": PREFIX + "water", "broader": {}}]}
        with pytest.raises(OntologyFormatError):
            list(iter_broader_relations(data))

    def test_self_broader_is_skipped(self):
        data = {
            "Description": [
                {"@about": PREFIX + "a", "broader": {"@resource": PREFIX + "a"}},
                {"@about": PREFIX + "b", "broader": {"@resource": PREFIX + "a"}},
            ]
        }
        relations = list(iter_broader_relations(data))
        assert [(r.parent, r.child) for r in relations] == [("a", "b")]

    @pytest.mark.parametrize("item", ["water", None, ["a"]])
    def test_non_object_item_raises(self, item):
        data = {"Description": [{"@about": PREFIX + "a"}, item]}
        with pytest.raises(OntologyFormatError):
            list(iter_broader_relations(data))

    def test_missing_descriptions_raises(self):
        with pytest.raises(OntologyFormatError):
            list(iter_broader_relations({"Concept": []}))

    def test_custom_descriptions_key(self):
        data = {"Concepts": [{"@about": PREFIX + "b", "broader": {"@resource": PREFIX + "a"}}]}
        relations = list(iter_broader_relations(data, {"descriptions_key": "Concepts"}))
        assert len(relations) == 1


class TestDefinitions:
    """定義表解析的測試。"""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Biodiversity", "biodiversity"),
            ("Climate Change", "climate-change"),
            ("Polluter Pays (Principle)", "polluter-pays-principle"),
            ("Man's  Land", "mans-land"),
        ],
    )
    def test_normalize_term_name(self, raw, expected):
        assert normalize_term_name(raw) == expected

    def test_parse_row_drops_blank_cells(self, sample_definition_rows):
        definition = parse_definition_row(sample_definition_rows[0])

        assert definition.term == "biodiversity"
        assert definition.topics == ["Biological diversity"]
        assert definition.synonyms == ["biological diversity", "biodiversity"]
        assert definition.definitions == ["The variability among living organisms."]

    def test_parse_row_respects_limits(self):
        row = {"Term": "Water", "Synonym #1": "h2o", "Synonym #2": "aqua"}
        definition = parse_definition_row(row, {"synonyms": 1})
        assert definition.synonyms == ["h2o"]

    def test_load_definition_rows(self, tmp_path, definitions_csv_text):
        path = tmp_path / "definitions.csv"
        path.write_text(definitions_csv_text, encoding="ISO-8859-3")

        rows = load_definition_rows(path)

        assert len(rows) == 2
        assert rows[0]["Term"] == "Biodiversity"
        assert rows[1]["Definition #1"] == "A change of climate, attributed to human activity."

    def test_load_definition_rows_with_custom_encoding(self, tmp_path):
        path = tmp_path / "definitions.csv"
        path.write_text("Term,Definition #1\nÉcosystème,Un système\n", encoding="utf-8")

        rows = load_definition_rows(path, {"encoding": "utf-8"})

        assert rows[0]["Term"] == "Écosystème"
