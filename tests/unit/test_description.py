"""Tests for JSON graph descriptions."""

import json

import pytest

from dotbuild import DescriptionError, EdgeKind
from dotbuild.description import GraphDescription, load_description

SAMPLE = {
    "name": "pipeline",
    "size": "8,8",
    "nodes": [
        {"name": "fetch", "shape": "box", "sides": 4},
        {"name": "parse", "label": "Parse \"HTML\""},
    ],
    "edges": [
        {"from": "fetch", "to": "parse", "color": "red"},
        {"from": "parse", "to": "store"},
    ],
    "subgraphs": [
        {"name": "cluster_out", "edges": [{"from": "store", "to": "index", "style": "dashed"}]},
    ],
}


class TestGraphDescription:
    """Test translation of descriptions into graphs."""

    def test_root_defaults_to_directed(self):
        """Test root defaults to directed."""
        graph = GraphDescription().to_graph()
        assert graph.directed
        assert graph.source == "digraph {\n}\n"

    def test_undirected(self):
        """Test undirected."""
        graph = GraphDescription(directed=False, strict=True).to_graph()
        assert graph.source == "strict graph {\n}\n"

    def test_sample_graph(self):
        """Test sample graph."""
        graph = GraphDescription.model_validate(SAMPLE).to_graph()

        assert graph.source == (
            'digraph "pipeline" {\n'
            'size="8,8";\n'
            '"fetch" [shape="box";sides=4;];\n'
            '"parse" [label="Parse \\"HTML\\"";];\n'
            '"store" [];\n'
            '"fetch"->"parse" [color="red";];\n'
            '"parse"->"store" [];\n'
            'subgraph "cluster_out" {\n'
            '"store" [];\n'
            '"index" [];\n'
            '"store"->"index" [style="dashed";];\n'
            "}\n"
            "}\n"
        )

    def test_subgraph_inherits_directedness(self):
        """Test subgraph inherits directedness."""
        description = GraphDescription.model_validate({
            "directed": False,
            "subgraphs": [{"edges": [{"from": "a", "to": "b"}]}],
        })
        graph = description.to_graph()
        assert graph.subgraphs[0].edges[0].kind is EdgeKind.UNDIRECTED

    def test_unknown_node_attribute_rejected(self):
        """Test unknown node attribute rejected."""
        with pytest.raises(ValueError):
            GraphDescription.model_validate({"nodes": [{"name": "a", "fontsize": 3}]})

    def test_edge_requires_endpoints(self):
        """Test edge requires endpoints."""
        with pytest.raises(ValueError):
            GraphDescription.model_validate({"edges": [{"from": "a"}]})


class TestLoadDescription:
    """Test loading description files."""

    def test_load(self, tmp_path):
        """Test loading a description file."""
        path = tmp_path / "graph.json"
        path.write_text(json.dumps(SAMPLE), encoding="utf-8")

        description = load_description(path)
        assert description.name == "pipeline"
        assert len(description.edges) == 2
        assert description.edges[0].tail == "fetch"

    def test_missing_file(self, tmp_path):
        """Test missing file."""
        with pytest.raises(DescriptionError, match="Cannot read"):
            load_description(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        """Test invalid json."""
        path = tmp_path / "graph.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(DescriptionError, match="Invalid JSON"):
            load_description(path)

    def test_schema_violation(self, tmp_path):
        """Test schema violation."""
        path = tmp_path / "graph.json"
        path.write_text(json.dumps({"nodes": "not a list"}), encoding="utf-8")

        with pytest.raises(DescriptionError, match="Invalid graph description"):
            load_description(path)

    def test_description_error_is_value_error(self, tmp_path):
        """Test description error is value error."""
        with pytest.raises(ValueError):
            load_description(tmp_path / "missing.json")
