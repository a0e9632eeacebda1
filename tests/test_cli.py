"""
CLI tests for scripts/bacon_score.py: argument handling, score output and exit codes.
"""
import io

from scripts.bacon_score import main


def run_cli(monkeypatch, capsys, argv, stdin=""):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    status = main(argv + ["--log-level", "CRITICAL"])
    captured = capsys.readouterr()
    return status, captured.out, captured.err


def test_scores_from_stdin(monkeypatch, capsys, dataset_file):
    status, out, err = run_cli(
        monkeypatch, capsys, [str(dataset_file)], "Russell Crowe\nKevin Bacon\nTom Hanks\n"
    )
    assert out == "Score: 2\nScore: 0\n"
    assert "Actor Could Not be Found." in err
    assert status == 1


def test_long_flag_prints_chain(monkeypatch, capsys, dataset_file):
    status, out, _ = run_cli(monkeypatch, capsys, ["-l", str(dataset_file)], "Ed Harris\n")
    assert out == "Score: 1\n\tKevin Bacon was in X-Men with Ed Harris\n"
    assert status == 0


def test_anchor_override(monkeypatch, capsys, dataset_file):
    status, out, _ = run_cli(
        monkeypatch, capsys, ["--anchor", "Russell Crowe", str(dataset_file)], "Kevin Bacon\n"
    )
    assert out == "Score: 2\n"
    assert status == 0


def test_argument_errors(monkeypatch, capsys, dataset_file):
    status, _, err = run_cli(monkeypatch, capsys, ["-l", "-l", str(dataset_file)])
    assert (status, err) == (1, "Too many optional Arguments.\n")

    status, _, err = run_cli(monkeypatch, capsys, [str(dataset_file), str(dataset_file)])
    assert (status, err) == (1, "Too many Files were given.\n")


def test_missing_dataset(monkeypatch, capsys, tmp_path):
    status, _, err = run_cli(monkeypatch, capsys, [str(tmp_path / "nope.txt")])
    assert status == 1
    assert err == "Could not Open the File.\n"


def test_malformed_dataset(monkeypatch, capsys, tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("Kevin Bacon\nMovie: X-Men\n", encoding="utf-8")
    status, _, err = run_cli(monkeypatch, capsys, [str(path)])
    assert status == 1
    assert err.startswith("Malformed dataset:")
