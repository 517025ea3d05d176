from __future__ import annotations

import os
from pathlib import Path

import pytest

from junit2md.render.report_md import RenderOptions
from junit2md.wiring import build_render_options, env_flag, load_dotenv_if_present


def test_load_dotenv_sets_missing_keys_only(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# comment\n"
        "JUNIT2MD_TEST_A=1   # inline comment\n"
        "JUNIT2MD_TEST_B='quoted # kept'\n"
        "JUNIT2MD_TEST_C=from-file\n"
        "not a pair\n",
        encoding="utf-8",
    )
    monkeypatch.delenv("JUNIT2MD_TEST_A", raising=False)
    monkeypatch.delenv("JUNIT2MD_TEST_B", raising=False)
    monkeypatch.setenv("JUNIT2MD_TEST_C", "from-env")

    load_dotenv_if_present(env_file)

    assert os.environ["JUNIT2MD_TEST_A"] == "1"
    assert os.environ["JUNIT2MD_TEST_B"] == "quoted # kept"
    assert os.environ["JUNIT2MD_TEST_C"] == "from-env"

    for key in ("JUNIT2MD_TEST_A", "JUNIT2MD_TEST_B"):
        monkeypatch.delenv(key, raising=False)


def test_load_dotenv_missing_file_is_noop(tmp_path: Path) -> None:
    load_dotenv_if_present(tmp_path / "does-not-exist.env")


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("true", True), (" YES ", True), ("on", True), ("0", False), ("", False), ("nope", False)],
)
def test_env_flag(raw: str, expected: bool) -> None:
    assert env_flag("FLAG", environ={"FLAG": raw}) is expected


def test_env_flag_unset() -> None:
    assert env_flag("FLAG", environ={}) is False


def test_build_render_options() -> None:
    assert build_render_options(verbose=True) == RenderOptions(verbose=True)
    assert build_render_options(verbose=False) == RenderOptions()
