"""
共用的測試資料：一份小型本體與對應的定義表。
"""

import pytest

PREFIX = "http://www.informea.org/terms/"


@pytest.fixture
def sample_ontology():
    """
    environment
    ├── biodiversity
    │   └── species
    └── climate-change
    chemicals
    └── waste
    """
    return {
        "Description": [
            {"@about": PREFIX + "environment"},
            {"@about": PREFIX + "biodiversity", "broader": {"@resource": PREFIX + "environment"}},
            {"@about": PREFIX + "species", "broader": {"@resource": PREFIX + "biodiversity"}},
            {"@about": PREFIX + "xl_en_species", "broader": {"@resource": PREFIX + "species"}},
            {"@about": PREFIX + "species", "broader": {"@resource": PREFIX + "environment"}},
            {"@about": PREFIX + "climate-change", "broader": {"@resource": PREFIX + "environment"}},
            {"@about": PREFIX + "waste", "broader": {"@resource": PREFIX + "chemicals"}},
        ]
    }


@pytest.fixture
def sample_definition_rows():
    return [
        {
            "Term": "Biodiversity",
            "Topic #1": "Biological diversity",
            "Topic #2": "",
            "Synonym #1": "biological diversity",
            "Synonym #2": "biodiversity",
            "Definition #1": "The variability among living organisms.",
        },
        {
            "Term": "Climate Change",
            "Topic #1": "Climate and Atmosphere",
            "Synonym #1": "biological diversity",
            "Synonym #2": "global warming",
            "Definition #1": "A change of climate attributed to human activity.",
            "Definition #2": "",
        },
        {
            "Term": "Unknown Term",
            "Definition #1": "Not part of the ontology.",
        },
    ]


@pytest.fixture
def definitions_csv_text():
    return (
        "Term,Topic #1,Synonym #1,Definition #1\n"
        "Biodiversity,Biological diversity,biological diversity,The variability among living organisms.\n"
        "\n"
        'Climate Change,Climate and Atmosphere,global warming,"A change of climate, attributed to human activity."\n'
    )
