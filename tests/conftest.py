"""Test configuration and fixtures for pathtree."""

import json

import pytest

from pathtree.path_tree.tree_builder import build_node, populate

FAMILY_SOURCE = [
    {
        "v": "henry",
        "a": [1],
        "c": [
            {"v": "carlos", "a": ["blakgeek", "2"], "c": [{"v": "norah"}]},
            {"v": "althea", "a": ["3"], "c": [{"v": "maurice"}, {"v": "malik"}]},
        ],
    },
    {
        "v": "sandra",
        "a": ["mummy", 1],
        "c": [
            {"v": "marisa", "a": [999], "c": [{"v": "norah"}]},
            {"v": "neisha", "a": [22], "c": [{"v": "khepri"}, {"v": "cayo"}]},
        ],
    },
]

FAMILY_LEVELS = ["grandparent", "parent", "child"]


@pytest.fixture
def family_source():
    """The compact source document of the two-family test tree."""
    return json.loads(json.dumps(FAMILY_SOURCE))


@pytest.fixture
def family_root(family_source):
    """Anonymous root over the henry and sandra families, with level names."""
    return populate([build_node(source) for source in family_source], FAMILY_LEVELS)


@pytest.fixture
def family_file(tmp_path, family_source):
    """The family tree written to a JSON source file with its levels."""
    source_file = tmp_path / "family.json"
    source_file.write_text(json.dumps({"levels": FAMILY_LEVELS, "nodes": family_source}))
    return source_file
