from pathlib import Path

import pytest

from dfpaths import cli


def test_cli_paths_tiny_cg(tiny_cg_file: Path, capsys) -> None:
    cli.main(["paths", str(tiny_cg_file), "0", "--order", "lifo"])
    out = capsys.readouterr().out

    for line in [
        "0 to 0:  0",
        "0 to 1:  0-2-1",
        "0 to 4:  0-2-3-4",
        "0 to 5:  0-2-3-5",
    ]:
        assert line in out


def test_cli_paths_from_source_2(tiny_cg_file: Path, capsys) -> None:
    cli.main(["paths", str(tiny_cg_file), "2", "--order", "LIFO"])
    out = capsys.readouterr().out
    assert "2 to 4:  2-0-5-3-4" in out


def test_cli_paths_with_adjacency_and_state(tiny_cg_file: Path, capsys) -> None:
    cli.main(
        ["--quiet", "paths", str(tiny_cg_file), "0", "--order", "lifo", "-a", "-s"]
    )
    out = capsys.readouterr().out

    assert "Adjacency List:" in out
    assert "0: 2->1->5" in out
    assert "marked" in out and "edgeTo" in out
    assert "0 to 3:  0-2-3" in out


def test_cli_paths_target(tiny_cg_file: Path, capsys) -> None:
    cli.main(["--quiet", "paths", str(tiny_cg_file), "0", "--target", "4"])
    out = capsys.readouterr().out.strip().splitlines()
    assert out == ["0 to 4:  0-2-3-4"]


def test_cli_paths_target_insertion_order(tiny_cg_file: Path, capsys) -> None:
    cli.main(
        ["--quiet", "paths", str(tiny_cg_file), "0", "-t", "4", "--order", "insertion"]
    )
    out = capsys.readouterr().out.strip().splitlines()
    assert out == ["0 to 4:  0-5-3-2-4"]


def test_cli_paths_not_connected(tmp_path: Path, capsys) -> None:
    graph_file = tmp_path / "g.txt"
    graph_file.write_text("3\n1\n0 1\n", encoding="utf-8")

    cli.main(["--quiet", "paths", str(graph_file), "0"])
    out = capsys.readouterr().out
    assert "0 to 2:  not connected" in out


def test_cli_adjacency(tiny_cg_file: Path, capsys) -> None:
    cli.main(["--quiet", "adjacency", str(tiny_cg_file), "--order", "sorted"])
    out = capsys.readouterr().out
    assert "0: 1->2->5" in out


def test_cli_invalid_source_exits(tiny_cg_file: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["paths", str(tiny_cg_file), "6"])
    assert exc_info.value.code == 1
    assert "vertex 6 is not between 0 and 5" in capsys.readouterr().out


def test_cli_invalid_target_exits(tiny_cg_file: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["paths", str(tiny_cg_file), "0", "--target", "-1"])
    assert exc_info.value.code == 1


def test_cli_missing_file_exits(tmp_path: Path, capsys) -> None:
    missing = tmp_path / "nope.txt"
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["paths", str(missing), "0"])
    assert exc_info.value.code == 1
    assert "Graph file not found" in capsys.readouterr().out

    with pytest.raises(SystemExit) as exc_info:
        cli.main(["adjacency", str(missing)])
    assert exc_info.value.code == 1


def test_cli_malformed_file_exits(tmp_path: Path, capsys) -> None:
    bad = tmp_path / "bad.txt"
    bad.write_text("3\nzz\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["adjacency", str(bad)])
    assert exc_info.value.code == 1
    assert "GraphFormatError" in capsys.readouterr().out


def test_cli_bad_order_is_usage_error(tiny_cg_file: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["adjacency", str(tiny_cg_file), "--order", "random"])
    assert exc_info.value.code == 2


def test_cli_no_args_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: dfpaths" in capsys.readouterr().out
