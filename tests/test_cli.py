# tests/test_cli.py
import json
from click.testing import CliRunner
from cli.main import cli


def test_sample_prints_all_kinds():
    result = CliRunner().invoke(cli, ["sample"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert [a["id"] for a in data["authors"]] == ["auth1", "auth2"]
    assert data["book-copies"][0]["bookId"] == "book1"


def test_sample_single_kind():
    result = CliRunner().invoke(cli, ["sample", "--kind", "genres"])
    assert result.exit_code == 0
    assert json.loads(result.output) == [
        {"id": "gen1", "name": "Science Fiction"},
        {"id": "gen2", "name": "Fantasy"},
    ]
