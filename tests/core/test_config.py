from __future__ import annotations

import pytest

from predarg.config import ViewConfig


def test_generator_derived_from_name():
    config = ViewConfig(view_name="SRL_VERB")
    assert config.view_generator == "SRL_VERB-annotator"
    assert config.score == 1.0
    assert config.reject_duplicate_predicates is False


def test_empty_name_rejected():
    with pytest.raises(ValueError):
        ViewConfig(view_name="")


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("PREDARG_VIEW_NAME", "SRL_NOM")
    monkeypatch.setenv("PREDARG_SCORE", "0.25")
    monkeypatch.setenv("PREDARG_REJECT_DUPLICATE_PREDICATES", "yes")
    monkeypatch.delenv("PREDARG_VIEW_GENERATOR", raising=False)

    config = ViewConfig.from_env(dotenv_path=tmp_path / "missing.env")

    assert config.view_name == "SRL_NOM"
    assert config.view_generator == "SRL_NOM-annotator"
    assert config.score == 0.25
    assert config.reject_duplicate_predicates is True


def test_from_env_reads_dotenv_file(monkeypatch, tmp_path):
    for name in ("VIEW_NAME", "VIEW_GENERATOR", "SCORE", "REJECT_DUPLICATE_PREDICATES"):
        monkeypatch.delenv(f"DOTENVTEST_{name}", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text(
        "DOTENVTEST_VIEW_NAME=SRL_PREP\nDOTENVTEST_VIEW_GENERATOR=prep-srl\n",
        encoding="utf-8",
    )

    config = ViewConfig.from_env(prefix="DOTENVTEST_", dotenv_path=env_file)

    assert config.view_name == "SRL_PREP"
    assert config.view_generator == "prep-srl"
    monkeypatch.delenv("DOTENVTEST_VIEW_NAME", raising=False)
    monkeypatch.delenv("DOTENVTEST_VIEW_GENERATOR", raising=False)


def test_explicit_name_wins(monkeypatch, tmp_path):
    monkeypatch.setenv("PREDARG_VIEW_NAME", "FROM_ENV")
    config = ViewConfig.from_env(view_name="EXPLICIT", dotenv_path=tmp_path / "none.env")
    assert config.view_name == "EXPLICIT"


def test_missing_name_raises(monkeypatch, tmp_path):
    monkeypatch.delenv("NONAME_VIEW_NAME", raising=False)
    with pytest.raises(ValueError):
        ViewConfig.from_env(prefix="NONAME_", dotenv_path=tmp_path / "none.env")
