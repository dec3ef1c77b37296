"""Unit tests for the CLI main module."""

import json
from unittest.mock import patch

import pytest

from pathtree.cli.main import format_counts, main


def run_main(argv):
    with patch("sys.argv", ["pathtree", *argv]):
        main()


def test_format_counts():
    assert format_counts({"nodes": 12, "leaves": 6, "matches": 3}) == "Nodes: 12\nLeaves: 6\nMatches: 3"
    assert format_counts({"nodes": 12, "leaves": 6, "matches": None}) == "Nodes: 12\nLeaves: 6"


def test_main_draws_tree_without_patterns(family_file, capsys):
    run_main([str(family_file)])

    out = capsys.readouterr().out
    assert out.splitlines()[0] == "henry [1]"
    assert "└── neisha [22]" in out
    assert len(out.splitlines()) == 12


def test_main_finds_patterns(family_file, capsys):
    run_main([str(family_file), "henry/carlos/norah", "/1/neisha/cayo"])

    assert capsys.readouterr().out == "/henry/carlos/norah\n/sandra/neisha/cayo\n"


def test_main_ancestor_by_level_name(family_file, capsys):
    run_main([str(family_file), "/henry/*/*", "-a", "parent"])

    assert capsys.readouterr().out.splitlines() == [
        "/henry/carlos/norah\t-> /henry/carlos",
        "/henry/althea/maurice\t-> /henry/althea",
        "/henry/althea/malik\t-> /henry/althea",
    ]


def test_main_levels_override(family_file, capsys):
    run_main([str(family_file), "/sandra/*/*", "-l", "family,branch", "-a", "family"])

    assert all(line.endswith("\t-> /sandra") for line in capsys.readouterr().out.splitlines())


def test_main_json_output_file(family_file, tmp_path, capsys):
    output_file = tmp_path / "matches.json"
    run_main([str(family_file), "/mummy/*", "-f", "json", "-o", str(output_file)])

    assert capsys.readouterr().out == ""
    entries = json.loads(output_file.read_text(encoding="utf-8"))
    assert [entry["value"] for entry in entries] == ["marisa", "neisha"]


def test_main_summary_stderr(family_file, capsys):
    run_main([str(family_file), "/*", "-s", "stderr"])

    captured = capsys.readouterr()
    assert captured.out == "/henry\n/sandra\n"
    assert captured.err == "Nodes: 12\nLeaves: 6\nMatches: 2\n"


def test_main_summary_stdout_without_patterns(family_file, capsys):
    run_main([str(family_file), "-s", "stdout"])

    assert capsys.readouterr().out.endswith("\nNodes: 12\nLeaves: 6\n")


def test_main_warns_when_nothing_matches(family_file, capsys):
    run_main([str(family_file), "/nobody"])

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Warning: No nodes matched" in captured.err


def test_main_invalid_source(tmp_path, capsys):
    source_file = tmp_path / "broken.json"
    source_file.write_text("{")

    with pytest.raises(SystemExit) as exc_info:
        run_main([str(source_file)])

    assert exc_info.value.code == 1
    assert capsys.readouterr().err.startswith(f"Error: Invalid tree source {source_file}: not valid JSON")


def test_main_missing_source(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_main([str(tmp_path / "missing.json")])

    assert exc_info.value.code == 1
    assert "cannot read file" in capsys.readouterr().err


def test_main_ancestor_without_patterns_is_usage_error(family_file, capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_main([str(family_file), "-a", "0"])

    assert exc_info.value.code == 2
    assert "-a/--ancestor requires at least one PATTERN" in capsys.readouterr().err


def test_main_broken_pipe(family_file):
    with (
        patch("sys.argv", ["pathtree", str(family_file)]),
        patch("pathtree.cli.main.StreamingPathQuery") as mock_query,
        patch("pathtree.cli.main._silence_stdout") as mock_silence,
        patch("sys.exit") as mock_exit,
    ):
        mock_query.return_value.stream_tree.side_effect = BrokenPipeError()
        main()

    mock_silence.assert_called_once_with()
    mock_exit.assert_called_once_with(141)
