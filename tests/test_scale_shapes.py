"""Tests for the console driver."""

import io
import logging

import pytest

from composition.logging_config import setup_logging
from scale_shapes import InputFormatError, iter_triples, main


def run(text: str, *args: str):
    out = io.StringIO()
    status = main(["--log-level", "CRITICAL", *args], stdin=io.StringIO(text), stdout=out)
    return status, out.getvalue().splitlines()


def test_iter_triples_across_lines() -> None:
    triples = list(iter_triples(io.StringIO("1 2\n3 4 5\n  6.5\n")))
    assert triples == [(1.0, 2.0, 3.0), (4.0, 5.0, 6.5)]


@pytest.mark.parametrize("text", ["1 2 x", "1 2", "1 2 3 4", "0 0 nan", "inf 0 1"])
def test_iter_triples_rejects_malformed_input(text: str) -> None:
    with pytest.raises(InputFormatError):
        list(iter_triples(io.StringIO(text)))


def test_single_step_prints_two_reports() -> None:
    status, lines = run("0 0 2\n")
    assert status == 0
    assert len(lines) == 4
    assert lines[0] == "66.5"
    assert float(lines[2]) == pytest.approx(4.0 * float(lines[0]), abs=0.2)


def test_several_steps() -> None:
    status, lines = run("0 0 2\n1 1 0.5\n3 -2 1\n")
    assert status == 0
    assert len(lines) == 8


def test_empty_input_fails() -> None:
    status, lines = run("")
    assert status == 1
    assert len(lines) == 2


def test_non_positive_factor_fails() -> None:
    status, lines = run("0 0 2\n0 0 -1\n")
    assert status == 1
    assert len(lines) == 4


def test_malformed_input_after_valid_step_fails() -> None:
    status, lines = run("0 0 2 1 1")
    assert status == 1
    assert len(lines) == 4


def test_error_is_logged(capsys) -> None:
    status = main([], stdin=io.StringIO("a b c"), stdout=io.StringIO())
    assert status == 1
    assert "Malformed input" in capsys.readouterr().err


def test_plot_written(tmp_path) -> None:
    out_path = tmp_path / "plots" / "steps.png"
    status, _ = run("0 0 2\n1 1 0.5\n", "--plot", str(out_path), "--cols", "2")
    assert status == 0
    assert out_path.exists()
    assert out_path.stat().st_size > 0


def test_log_file(tmp_path) -> None:
    log_path = tmp_path / "run.log"
    setup_logging("DEBUG", str(log_path))
    logging.getLogger("shapes.geometry").debug("hello from shapes")
    for handler in logging.getLogger("shapes").handlers:
        handler.flush()
    text = log_path.read_text(encoding="utf-8")
    assert "hello from shapes" in text
    for handler in logging.getLogger("shapes").handlers:
        handler.close()
    setup_logging(logging.WARNING)


def test_repeated_setup_closes_previous_file_handler(tmp_path) -> None:
    setup_logging("INFO", str(tmp_path / "first.log"))
    first = [h for h in logging.getLogger("shapes").handlers if isinstance(h, logging.FileHandler)]
    assert len(first) == 1
    setup_logging("INFO", str(tmp_path / "second.log"))
    assert first[0].stream is None
    setup_logging(logging.WARNING)


def test_unknown_log_level() -> None:
    with pytest.raises(ValueError):
        setup_logging("chatty")
