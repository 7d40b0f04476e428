"""Tests for `dfpaths.config` defaults and their effect on reports and loading."""

from dfpaths import config
from dfpaths.config import GraphIOConfig, ReportConfig
from dfpaths.io import read_graph
from dfpaths.paths import DepthFirstPaths
from dfpaths.report import format_adjacency, format_paths
from dfpaths.types import AdjacencyOrder


def test_defaults() -> None:
    report = ReportConfig()
    assert report.path_separator == "-"
    assert report.adjacency_separator == "->"
    assert report.not_connected == "not connected"

    io_config = GraphIOConfig()
    assert io_config.comment_prefix == "#"
    assert io_config.default_order is AdjacencyOrder.LIFO


def test_report_config_changes_output(monkeypatch, isolated_vertex) -> None:
    monkeypatch.setattr(config.REPORT_CONFIG, "path_separator", " > ")
    monkeypatch.setattr(config.REPORT_CONFIG, "adjacency_separator", ", ")
    monkeypatch.setattr(config.REPORT_CONFIG, "not_connected", "unreachable")

    dfs = DepthFirstPaths(isolated_vertex, 0)
    lines = format_paths(dfs).splitlines()

    assert lines[2] == "0 to 2:  0 > 1 > 2"
    assert lines[3] == "0 to 3:  unreachable"
    assert "1: 0, 2" in format_adjacency(isolated_vertex)


def test_io_config_changes_loading(monkeypatch) -> None:
    monkeypatch.setattr(config.IO_CONFIG, "default_order", AdjacencyOrder.SORTED)
    monkeypatch.setattr(config.IO_CONFIG, "comment_prefix", "%")

    g = read_graph(["% header", "3 2", "0 2", "0 1"])

    assert g.order is AdjacencyOrder.SORTED
    assert g.neighbors(0) == (1, 2)
