from __future__ import annotations

import logging
from typing import Iterator

import pytest

from autocuber.config import LAYERS_ENV, LOG_LEVEL_ENV
from autocuber.host import ROOT_LOGGER_NAME
from autocuber.state import Cube
import scripts.show_cube as show_cube


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv(LAYERS_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    yield
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.NOTSET)


def test_prints_formula_and_net(capsys: pytest.CaptureFixture[str]) -> None:
    assert show_cube.main(["--formula", "F"]) == 0
    out = capsys.readouterr().out
    assert out == "F\n" + Cube.solved().apply("F").render()


def test_canonical_flag_simplifies_first(capsys: pytest.CaptureFixture[str]) -> None:
    assert show_cube.main(["--formula", "R R U U'", "--canonical"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "R2"
    assert out.endswith(Cube.solved().apply("R2").render())


def test_inverse_flag(capsys: pytest.CaptureFixture[str]) -> None:
    assert show_cube.main(["--formula", "R U2 F'", "--inverse"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "F U2 R'"


def test_layers_flag_and_env(capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    assert show_cube.main(["--formula", "B", "--layers", "4"]) == 0
    assert capsys.readouterr().out.endswith(Cube.solved(4).apply("B").render())

    monkeypatch.setenv(LAYERS_ENV, "2")
    assert show_cube.main(["--formula", "U"]) == 0
    assert capsys.readouterr().out.endswith(Cube.solved(2).apply("U").render())


def test_bad_formula_exits_with_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert show_cube.main(["--formula", "R Q"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "at index 2" in captured.err
