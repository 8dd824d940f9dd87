"""Tests for the command line interface."""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from nordum.cli import client as api_client
from nordum.cli.main import main
from nordum.core.lexicon import Lexicon
from nordum.server import deps
from nordum.server.main import app


def run_cli(capsys, *argv):
    main(list(argv))
    return capsys.readouterr().out


def output_lines(out):
    return [line for line in out.splitlines() if line and not line.startswith("Loaded")]


def test_search(capsys, fixture_path):
    out = run_cli(capsys, "--dict", str(fixture_path), "search", "hus", "--filter", "nordum")
    
    lines = output_lines(out)
    assert lines[0].startswith("hus ")
    assert lines[1].startswith("huset ")
    assert "house" in lines[0]


def test_search_no_matches(capsys, fixture_path):
    out = run_cli(capsys, "--dict", str(fixture_path), "search", "qqq")
    assert "No matches for 'qqq'." in out


def test_search_rejects_unknown_filter(capsys, fixture_path):
    with pytest.raises(SystemExit):
        main(["--dict", str(fixture_path), "search", "hus", "--filter", "swedish"])


def test_letter(capsys, fixture_path):
    out = run_cli(capsys, "--dict", str(fixture_path), "letter", "s")
    
    words = [line.split()[0] for line in output_lines(out)]
    assert words == ["ser", "sjø", "snakker", "stor"]


def test_check(capsys, fixture_path):
    out = run_cli(capsys, "--dict", str(fixture_path), "check", "Jeg ser en hundd.")
    
    assert "4 words" in out
    assert "hundd → hund" in out


def test_check_flags_words_missing_from_dictionary(capsys, fixture_path):
    out = run_cli(capsys, "--dict", str(fixture_path), "check", "Jeg ser en stor hund og en katt.")
    assert "en →" in out
    assert "No unknown words" not in out


def test_check_clean_text(capsys, fixture_path):
    out = run_cli(capsys, "--dict", str(fixture_path), "check", "Jeg ser hus.")
    assert "No unknown words" in out
    assert "3 words" in out
    assert "1 sentence" in out
    assert "1 sentences" not in out


def test_check_file(capsys, fixture_path, tmp_path):
    path = tmp_path / "text.txt"
    path.write_text("God vann. Katt!", encoding="utf-8")
    
    out = run_cli(capsys, "--dict", str(fixture_path), "check", "--file", str(path))
    assert "2 sentences" in out


def test_check_without_text(capsys, fixture_path):
    with pytest.raises(SystemExit) as exc:
        main(["--dict", str(fixture_path), "check"])
    assert exc.value.code == 1
    assert "✗ Error" in capsys.readouterr().out


def test_show(capsys, fixture_path):
    out = run_cli(capsys, "--dict", str(fixture_path), "show", "vann")
    
    assert "English: water" in out
    assert "Gender: neuter" in out
    assert "vatten" in out


def test_show_missing(capsys, fixture_path):
    with pytest.raises(SystemExit) as exc:
        main(["--dict", str(fixture_path), "show", "nonexistent"])
    assert exc.value.code == 1
    assert "Entry not found: nonexistent" in capsys.readouterr().out


def test_stats(capsys, fixture_path):
    out = run_cli(capsys, "--dict", str(fixture_path), "stats")
    
    assert "Entries: 16" in out
    assert "nouns: 8" in out


def test_missing_dictionary(capsys, tmp_path):
    out = run_cli(capsys, "--dict", str(tmp_path / "missing.json"), "search", "hus")
    
    assert "Dictionary unavailable" in out
    assert "No matches" in out


# === Remote mode through the API ===

@pytest.fixture
def remote(fixture_path, monkeypatch):
    deps.set_lexicon(Lexicon.from_path(fixture_path))
    monkeypatch.setattr(api_client, "_http", lambda: TestClient(app))
    yield
    deps.set_lexicon(None)


def test_remote_search(capsys, remote):
    capsys.readouterr()
    out = run_cli(capsys, "--remote", "--json", "search", "house", "--filter", "english")
    
    start = out.index("[")
    results = json.loads(out[start:])
    assert [e["key"] for e in results] == ["hus", "huset"]


def test_remote_show_missing(capsys, remote):
    with pytest.raises(SystemExit):
        main(["--remote", "show", "nonexistent"])
    assert "✗ Error" in capsys.readouterr().out


def test_client_spell_check(remote):
    result = api_client.spell_check("hundd")
    assert result["errors"] == [{"word": "hundd", "suggestions": ["hund"]}]


def test_client_reload_keeps_lexicon_on_failure(remote, tmp_path, monkeypatch):
    monkeypatch.setenv("NORDUM_DICTIONARY", str(tmp_path / "missing.json"))
    
    with pytest.raises(Exception):
        api_client.reload()
    assert len(api_client.search("hus", "nordum")) == 2


def test_client_quotes_path_segments(remote):
    assert api_client.words_by_letter("?") == []
    
    with pytest.raises(httpx.HTTPStatusError) as exc:
        api_client.get_entry("a/b")
    assert exc.value.response.status_code == 404


def test_remote_reload(capsys, remote, tmp_path, monkeypatch):
    path = tmp_path / "dictionary.json"
    path.write_text(json.dumps({"entries": {"ny": {"nordum": "ny", "english": "new"}}}), encoding="utf-8")
    monkeypatch.setenv("NORDUM_DICTIONARY", str(path))
    capsys.readouterr()
    
    out = run_cli(capsys, "reload")
    assert "✓ Reloaded" in out
    assert "Entries: 1" in out
    assert [e["key"] for e in api_client.search("ny")] == ["ny"]


def test_remote_reload_failure(capsys, remote, tmp_path, monkeypatch):
    monkeypatch.setenv("NORDUM_DICTIONARY", str(tmp_path / "missing.json"))
    
    with pytest.raises(SystemExit):
        main(["reload"])
    assert "✗ Error" in capsys.readouterr().out
