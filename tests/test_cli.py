from pathlib import Path

import pytest

from apps.cli import play as play_cli
from apps.cli import simulate as simulate_cli
from wordassist.engine import Reply, Word


def words(*ws):
    return [Word.parse(w) for w in ws]


def _prompter(answers):
    it = iter(answers)
    return lambda _msg: next(it)


def test_play_finds_answer(capsys):
    inputs = ["cr4ne", "crane", "x", "N", "N", "C", "N", "C"]
    rc = play_cli.play(words("crane", "slate", "trace"), color=False, prompt=_prompter(inputs))
    out = capsys.readouterr().out
    assert rc == 0
    assert "Initial word list contains 3 words." in out
    assert "Not a five-letter word: 'cr4ne'" in out
    assert "c r a n e" in out
    assert "Answer should be slate" in out


def test_play_whole_pattern_contradiction(capsys):
    rc = play_cli.play(words("crane", "slate", "trace"), color=False,
                       prompt=_prompter(["crane", "nnnnn"]))
    assert rc == 1
    assert "No word in the dictionary matches" in capsys.readouterr().out


def test_render_colors():
    fb = (Reply.CORRECT, Reply.PRESENT, Reply.ABSENT, Reply.ABSENT, Reply.ABSENT)
    s = play_cli.render(Word.parse("crane"), fb)
    assert play_cli.STYLES[Reply.CORRECT] + "c" in s
    assert play_cli.STYLES[Reply.PRESENT] + "r" in s
    assert play_cli.render(Word.parse("crane"), fb, color=False) == "c r a n e"


def test_play_main_missing_file(tmp_path: Path, capsys):
    assert play_cli.main([str(tmp_path / "nope.txt")]) == 2
    assert "error:" in capsys.readouterr().err


def test_play_main_eof(tmp_path: Path, monkeypatch):
    f = tmp_path / "words.txt"
    f.write_text("crane\nslate\n", encoding="utf-8")

    def _eof(_msg):
        raise EOFError

    monkeypatch.setattr("builtins.input", _eof)
    assert play_cli.main([str(f), "--no-color"]) == 1


def test_simulate_main_writes_reports(tmp_path: Path, capsys):
    f = tmp_path / "words.txt"
    f.write_text("crane\nslate\ntrace\npious\nbumpy\n", encoding="utf-8")
    outdir = tmp_path / "reports"
    rc = simulate_cli.main([str(f), "--outdir", str(outdir), "--progress", "off"])
    assert rc == 0
    assert len(list(outdir.glob("selfplay_*.csv"))) == 1
    assert len(list(outdir.glob("selfplay_*_manifest.json"))) == 1
    assert "Solved 5/5" in capsys.readouterr().out


def test_simulate_rejects_zero_sample(tmp_path: Path, capsys):
    f = tmp_path / "words.txt"
    f.write_text("crane\nslate\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        simulate_cli.main([str(f), "--sample", "0", "--outdir", str(tmp_path), "--progress", "off"])
    assert exc.value.code == 2
    assert "--sample must be >= 1" in capsys.readouterr().err


def test_simulate_sample_limits_games(tmp_path: Path, capsys):
    f = tmp_path / "words.txt"
    f.write_text("crane\nslate\ntrace\npious\nbumpy\n", encoding="utf-8")
    rc = simulate_cli.main([str(f), "--sample", "2", "--outdir", str(tmp_path / "r"),
                            "--progress", "off"])
    assert rc == 0
    assert "Solved 2/2" in capsys.readouterr().out


def test_play_main_reads_wordlist_once(tmp_path: Path, monkeypatch, capsys):
    f = tmp_path / "words.txt"
    f.write_text("crane\n", encoding="utf-8")
    opened = []
    real_open = Path.open

    def counting_open(self, *args, **kwargs):
        opened.append(self)
        return real_open(self, *args, **kwargs)

    monkeypatch.setattr(Path, "open", counting_open)
    assert play_cli.main([str(f), "--no-color"]) == 0
    assert opened == [f]
    out = capsys.readouterr().out
    assert "words=1" in out and "Answer should be crane" in out
