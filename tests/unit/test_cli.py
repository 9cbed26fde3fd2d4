"""Tests for CLI module."""

import json
import logging
from importlib.metadata import PackageNotFoundError
from pathlib import Path
from unittest.mock import patch

import pytest

from go_test_sarif.cli import build_parser, get_version, main, run


@pytest.fixture
def input_file(tmp_path: Path) -> Path:
    """Create a go test -json log with one failing test."""
    path = tmp_path / "input.json"
    path.write_text(
        '{"Action":"fail","Package":"example.com/foo","Test":"TestBar",'
        '"Output":"failed"}\n'
    )
    return path


@pytest.mark.parametrize("flag", ["--version", "-v"])
def test_prints_version(flag: str, capsys: pytest.CaptureFixture[str]) -> None:
    """Prints the program name and version."""
    exit_code = run([flag])

    assert exit_code == 0
    assert capsys.readouterr().out.startswith("go-test-sarif ")


def test_get_version_when_not_installed() -> None:
    """Falls back to "dev" when package metadata is missing."""
    with patch("go_test_sarif.cli.version", side_effect=PackageNotFoundError):
        assert get_version() == "dev"


def test_missing_arguments_print_usage(capsys: pytest.CaptureFixture[str]) -> None:
    """Prints usage and fails when no files are given."""
    exit_code = run([])

    assert exit_code == 1
    assert "usage: go-test-sarif" in capsys.readouterr().err


def test_missing_output_prints_usage(
    input_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Prints usage and fails when the output file is missing."""
    exit_code = run([str(input_file)])

    assert exit_code == 1
    assert "usage: go-test-sarif" in capsys.readouterr().err


def test_unknown_flag_fails(capsys: pytest.CaptureFixture[str]) -> None:
    """Unknown flags fail with exit code 1."""
    exit_code = run(["--bogus", "in.json", "out.sarif"])

    assert exit_code == 1
    assert "unrecognized arguments: --bogus" in capsys.readouterr().err


def test_help_succeeds(capsys: pytest.CaptureFixture[str]) -> None:
    """Help lists the supported SARIF versions."""
    exit_code = run(["--help"])

    output = capsys.readouterr().out
    assert exit_code == 0
    assert "--sarif-version" in output
    assert "2.1.0" in output
    assert "2.2" in output
    assert "--pretty" in output


def test_parser_defaults() -> None:
    """Defaults to compact SARIF 2.1.0."""
    args = build_parser().parse_args(["in.json", "out.sarif"])

    assert args.input == Path("in.json")
    assert args.output == Path("out.sarif")
    assert args.sarif_version == "2.1.0"
    assert args.pretty is False
    assert args.version is False


def test_converts_file(input_file: Path, tmp_path: Path) -> None:
    """Writes the SARIF report and succeeds."""
    output_path = tmp_path / "output.sarif"

    exit_code = run([str(input_file), str(output_path)])

    assert exit_code == 0
    document = json.loads(output_path.read_bytes())
    assert document["version"] == "2.1.0"
    assert len(document["runs"][0]["results"]) == 1


def test_converts_with_options(input_file: Path, tmp_path: Path) -> None:
    """Honours --sarif-version and --pretty."""
    output_path = tmp_path / "output.sarif"

    exit_code = run(
        ["--sarif-version", "2.2", "--pretty", str(input_file), str(output_path)]
    )

    assert exit_code == 0
    content = output_path.read_text()
    assert '\n  "version": "2.2"' in content


def test_logs_generated_report(
    input_file: Path, tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Logs the path of the generated report."""
    output_path = tmp_path / "output.sarif"

    with caplog.at_level(logging.INFO):
        run([str(input_file), str(output_path)])

    assert f"SARIF report generated: {output_path}" in caplog.text


def test_unsupported_version_fails(
    input_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Reports an unsupported version and writes nothing."""
    output_path = tmp_path / "output.sarif"

    exit_code = run(
        ["--sarif-version", "9.9.9", str(input_file), str(output_path)]
    )

    assert exit_code == 1
    assert "Error: unsupported SARIF version: 9.9.9" in capsys.readouterr().err
    assert not output_path.exists()


def test_missing_input_fails(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Reports a missing input file."""
    exit_code = run([str(tmp_path / "missing.json"), str(tmp_path / "out.sarif")])

    assert exit_code == 1
    assert "Error:" in capsys.readouterr().err


def test_invalid_input_fails(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Reports the malformed line of the input."""
    input_path = tmp_path / "input.json"
    input_path.write_text('{"Action":"run"}\n{oops\n')

    exit_code = run([str(input_path), str(tmp_path / "out.sarif")])

    assert exit_code == 1
    assert "Error: line 2: invalid JSON" in capsys.readouterr().err


class TestMain:
    """Tests for main CLI entry point."""

    def test_exits_with_run_result(self) -> None:
        """Main function exits with the result from run()."""
        with (
            patch("sys.argv", ["go-test-sarif", "in.json", "out.sarif"]),
            patch("go_test_sarif.cli.run", return_value=0) as mock_run,
            pytest.raises(SystemExit) as exc_info,
        ):
            main()

        assert exc_info.value.code == 0
        mock_run.assert_called_once_with(["in.json", "out.sarif"])

    def test_exits_with_failure_code(self) -> None:
        """Main function exits with code 1 on conversion failures."""
        with (
            patch("sys.argv", ["go-test-sarif", "in.json", "out.sarif"]),
            patch("go_test_sarif.cli.run", return_value=1),
            pytest.raises(SystemExit) as exc_info,
        ):
            main()

        assert exc_info.value.code == 1
