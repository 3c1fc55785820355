import json

from click.testing import CliRunner

from sharecheck.cli import cli

DOCUMENT = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "16", "value": "e"},
    "4": {"base": "10", "value": "26"},
}


def test_reconstruct_reports_bad_share():
    runner = CliRunner()
    result = runner.invoke(cli, ["reconstruct"], input=json.dumps(DOCUMENT))
    assert result.exit_code == 0, result.output
    assert "Best-fit shares count: 3/4" in result.output
    assert "Bad/Incorrect shares (do NOT fit):" in result.output
    assert "x=4  y(base 10)='26'" in result.output
    assert "decimal = 5" in result.output
    assert "Subset used (x values): 1, 2, 3" in result.output


def test_reconstruct_json_from_file(tmp_path):
    path = tmp_path / "shares.json"
    path.write_text(json.dumps(DOCUMENT))
    runner = CliRunner()
    result = runner.invoke(cli, ["reconstruct", "--json", "--workers", "2", str(path)])
    assert result.exit_code == 0, result.output
    report = json.loads(result.output)
    assert report["secret"]["decimal"] == "5"
    assert [b["x"] for b in report["bad"]] == [4]
    assert report["n"] == 4 and report["k"] == 3


def test_reconstruct_errors_exit_one():
    runner = CliRunner()
    bad = dict(DOCUMENT, keys={"n": 4, "k": 1})
    result = runner.invoke(cli, ["reconstruct"], input=json.dumps(bad))
    assert result.exit_code == 1
    assert "Error: k must be >= 2" in result.output


def test_reconstruct_strict_rejects_uncorroborated():
    document = {
        "keys": {"n": 3, "k": 2},
        "1": {"base": "10", "value": "1"},
        "2": {"base": "10", "value": "5"},
        "3": {"base": "10", "value": "4"},
    }
    runner = CliRunner()
    result = runner.invoke(cli, ["reconstruct", "--strict"], input=json.dumps(document))
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_split_then_reconstruct_roundtrip():
    runner = CliRunner()
    split = runner.invoke(cli, ["split", "987654321", "-n", "5", "-k", "3", "--base", "16"])
    assert split.exit_code == 0, split.output
    result = runner.invoke(cli, ["reconstruct", "--json"], input=split.output)
    report = json.loads(result.output)
    assert report["secret"]["decimal"] == "987654321"
    assert report["fit_count"] == 5
    assert report["bad"] == []


def test_split_invalid_threshold():
    runner = CliRunner()
    result = runner.invoke(cli, ["split", "5", "-n", "2", "-k", "3"])
    assert result.exit_code == 1
    assert "Error:" in result.output
