"""Tests for scripts/build_portfolio.py."""

import json

import pytest

from conftest import import_script

build_script = import_script("build_portfolio")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("PORTFOLIO_LOG_LEVEL", "PORTFOLIO_DEFAULT_THEME"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("PORTFOLIO_OUTPUT_DIR", str(tmp_path / "default-output"))


@pytest.fixture
def document_path(tmp_path, portfolio_document):
    path = tmp_path / "alice.json"
    path.write_text(json.dumps(portfolio_document), encoding="utf-8")
    return path


def test_writes_html_to_output(document_path, tmp_path, capsys):
    output_path = tmp_path / "site" / "index.html"

    exit_code = build_script.main([str(document_path), "--output", str(output_path)])

    assert exit_code == 0
    assert output_path.exists()
    html = output_path.read_text(encoding="utf-8")
    assert "<h1>Alice</h1>" in html
    assert "body { background: #121212; color: #ffffff; }" in html
    assert f"Portfolio written: {output_path}" in capsys.readouterr().out


def test_defaults_to_configured_output_dir(document_path, tmp_path):
    exit_code = build_script.main([str(document_path)])

    assert exit_code == 0
    assert (tmp_path / "default-output" / "alice.html").exists()


def test_json_summary_with_theme_override(document_path, tmp_path, capsys):
    output_path = tmp_path / "light.html"

    exit_code = build_script.main(
        [str(document_path), "--output", str(output_path), "--theme", "light", "--json"]
    )

    assert exit_code == 0
    summary = json.loads(capsys.readouterr().out)
    assert summary["output"] == str(output_path)
    assert summary["projects"] == 2
    assert summary["theme"] == "light"
    assert summary["size_bytes"] == len(output_path.read_bytes())


def test_default_theme_from_environment(monkeypatch, tmp_path, owner_config, sample_project):
    monkeypatch.setenv("PORTFOLIO_DEFAULT_THEME", "dark")
    path = tmp_path / "plain.json"
    path.write_text(
        json.dumps({"config": owner_config, "projects": [sample_project]}),
        encoding="utf-8",
    )
    output_path = tmp_path / "plain.html"

    assert build_script.main([str(path), "--output", str(output_path)]) == 0
    assert "#121212" in output_path.read_text(encoding="utf-8")


def test_duplicate_project_fails(tmp_path, portfolio_document, sample_project, capsys):
    portfolio_document["projects"].append(dict(sample_project))
    path = tmp_path / "dupe.json"
    path.write_text(json.dumps(portfolio_document), encoding="utf-8")

    exit_code = build_script.main([str(path), "--output", str(tmp_path / "dupe.html")])

    assert exit_code == 1
    err = capsys.readouterr().err
    assert 'Portfolio error (duplicate_id): Project with ID "1" already exists' in err
    assert not (tmp_path / "dupe.html").exists()


def test_invalid_json_fails(tmp_path, capsys):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    assert build_script.main([str(path)]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_missing_document_fails(tmp_path, capsys):
    assert build_script.main([str(tmp_path / "nope.json")]) == 1
    assert "Error:" in capsys.readouterr().err


def test_empty_portfolio_fails(tmp_path, owner_config, capsys):
    path = tmp_path / "empty.json"
    path.write_text(json.dumps({"config": owner_config, "projects": []}), encoding="utf-8")

    assert build_script.main([str(path), "--output", str(tmp_path / "empty.html")]) == 1
    assert "Cannot generate HTML for empty portfolio" in capsys.readouterr().err
