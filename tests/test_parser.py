"""Tests for Razor component extraction and relation files."""

import json
from pathlib import Path

import pytest

from blazor_graph.parser.razor import (
    ExtractionError,
    build_relation,
    extract_components,
    find_razor_files,
    promote_starting_node,
    read_relation,
    write_relation,
)
from blazor_graph.rules import NamingRules

FIXTURES = Path(__file__).parent / "fixtures"
RAZOR_DIR = FIXTURES / "razor"


def test_extract_components_basic():
    source = '<MainLayout><NavMenu /><Counter IncrementAmount="5"/></MainLayout>'
    assert extract_components(source) == ["MainLayout", "NavMenu", "Counter"]


def test_extract_ignores_html_tags():
    source = "<div><Card>ok</Card><button>no</button><Table/><table></table></div>"
    # HTML tag names match case-insensitively, so "Table" is dropped too
    assert extract_components(source) == ["Card"]


def test_extract_ignores_lowercase_tags():
    assert extract_components("<custom-element></custom-element><myWidget />") == []


def test_extract_ignores_closing_tags():
    assert extract_components("</Card>") == []


def test_extract_deduplicates_in_first_seen_order():
    source = "<Card/><Badge/><Card/><Badge></Badge><Avatar>"
    assert extract_components(source) == ["Card", "Badge", "Avatar"]


def test_extract_skips_comments():
    source = "@* <Hidden /> *@\n<!-- <AlsoHidden/> -->\n<Shown />"
    assert extract_components(source) == ["Shown"]


def test_extract_dotted_and_generic_names():
    source = '<Shared.Card /><Grid TItem="Order"></Grid>'
    assert extract_components(source) == ["Shared.Card", "Grid"]


def test_extract_tag_name_must_end_cleanly():
    # "<Card" at end of input has no terminator and is ignored
    assert extract_components("text <Card") == []


def test_find_razor_files_sorted():
    files = find_razor_files(RAZOR_DIR)
    assert [f.stem for f in files] == ["App", "Counter", "MainLayout", "NavMenu"]


def test_find_razor_files_missing_directory(tmp_path):
    with pytest.raises(ExtractionError, match="does not exist"):
        find_razor_files(tmp_path / "missing")


def test_find_razor_files_empty_directory(tmp_path, caplog):
    assert find_razor_files(tmp_path) == []
    assert "No .razor files" in caplog.text


def test_build_relation_from_fixture_project():
    relation = build_relation(RAZOR_DIR)
    assert relation == {
        "App": ["MainLayout", "NavMenu", "Counter"],
        "Counter": [],
        "MainLayout": ["MudThemeProvider", "NavMenu"],
        "NavMenu": ["CartSummary", "CartState"],
    }


def test_build_relation_applies_rules():
    rules = NamingRules(vendors=["Mud"], display_vendor_components=False, skips=["Counter"])
    relation = build_relation(RAZOR_DIR, rules=rules)
    assert relation == {
        "App": ["MainLayout", "NavMenu"],
        "MainLayout": ["NavMenu"],
        "NavMenu": ["CartSummary", "CartState"],
    }


def test_build_relation_starting_node_first():
    relation = build_relation(RAZOR_DIR, starting_node="NavMenu")
    assert list(relation) == ["NavMenu", "App", "Counter", "MainLayout"]


def test_promote_starting_node_unknown(caplog):
    relation = {"A": ["B"], "C": []}
    assert promote_starting_node(relation, "Z") == relation
    assert "Z" in caplog.text


def test_promote_starting_node_copies():
    relation = {"A": ["B"], "C": []}
    promoted = promote_starting_node(relation, "C")
    assert list(promoted) == ["C", "A"]
    promoted["A"].append("X")
    assert relation["A"] == ["B"]


def test_read_relation_keeps_order():
    relation = read_relation(FIXTURES / "relations" / "app.json")
    assert list(relation) == ["App", "Header", "Body"]
    assert relation["App"] == ["Header", "Body"]


def test_read_relation_rejects_non_object(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("[1, 2]")
    with pytest.raises(ValueError, match="JSON object"):
        read_relation(path)


def test_read_relation_rejects_bad_dependencies(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('{"App": "Header"}')
    with pytest.raises(ValueError, match="App"):
        read_relation(path)


def test_write_relation(tmp_path):
    path = tmp_path / "out.json"
    write_relation({"App": ("Header",), "Header": []}, path)
    assert json.loads(path.read_text()) == {"App": ["Header"], "Header": []}
