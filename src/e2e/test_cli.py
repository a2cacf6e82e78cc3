import io
import json
from pathlib import Path

import pytest

from frontend.__main__ import main


def _seed(tmp: Path) -> str:
    path = tmp / "names.txt"
    path.write_text("foo_bar_baz\nfoobarbaz\nHello World\n", encoding="utf-8")
    return str(path)


@pytest.mark.e2e
def test_cli_json_rows(tmp_path: Path, capsys):
    assert main(["fbb", "--file", _seed(tmp_path), "--json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert rows[0]["text"] == "foo_bar_baz"
    assert rows[0]["positions"] == [0, 4, 8]


@pytest.mark.e2e
def test_cli_table_highlights_matches(tmp_path: Path, capsys):
    assert main(["hw", "-f", _seed(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "[H]ello [W]orld" in out


@pytest.mark.e2e
def test_cli_no_matches(tmp_path: Path, capsys):
    assert main(["hw", "-f", _seed(tmp_path), "--case-sensitive"]) == 0
    assert "(no matches)" in capsys.readouterr().out


@pytest.mark.e2e
def test_cli_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("alpha\nbeta\n\ngamma\n"))
    assert main(["ga", "--json", "-k", "0"]) == 0
    assert [r["text"] for r in json.loads(capsys.readouterr().out)] == ["gamma"]


@pytest.mark.e2e
def test_cli_usage_errors(tmp_path: Path):
    with pytest.raises(SystemExit) as exc:
        main(["--file", _seed(tmp_path)])
    assert exc.value.code == 2
    with pytest.raises(SystemExit) as exc:
        main(["x", "--file", str(tmp_path / "missing.txt")])
    assert exc.value.code == 2
