from pathlib import Path

from script import convert_wordlist


def test_text_to_fixed_with_dedupe(tmp_path: Path, capsys):
    src = tmp_path / "words.txt"
    src.write_text("Crane\nhållö\ncrane\ncr4ne\n", encoding="utf-8")
    out = tmp_path / "words.dat"

    convert_wordlist.main(["--in", str(src), "--out", str(out), "--to", "fixed", "--dedupe"])
    assert out.read_bytes() == b"crane\nh\xe5ll\xf6\n"
    assert "(3 words) -> " in capsys.readouterr().out


def test_text_to_fixed_keeps_duplicates_and_record_size(tmp_path: Path):
    src = tmp_path / "words.txt"
    src.write_text("crane\ncrane\n", encoding="utf-8")
    out = tmp_path / "words.dat"

    convert_wordlist.main(["--in", str(src), "--out", str(out), "--to", "fixed",
                           "--record-size", "7"])
    assert out.read_bytes() == b"crane\n\ncrane\n\n"


def test_fixed_to_text(tmp_path: Path):
    src = tmp_path / "words.dat"
    src.write_bytes(b"\xe5skor\nSLATE\nab\xe9de\nslate\n")
    out = tmp_path / "words.txt"

    convert_wordlist.main(["--in", str(src), "--out", str(out), "--to", "text", "--dedupe"])
    assert out.read_text(encoding="utf-8") == "åskor\nslate\n"


def test_round_trip(tmp_path: Path):
    src = tmp_path / "a.txt"
    src.write_text("crane\nhållö\ncrane\n", encoding="utf-8")
    dat, back = tmp_path / "b.dat", tmp_path / "c.txt"

    convert_wordlist.main(["--in", str(src), "--out", str(dat), "--to", "fixed", "--dedupe"])
    convert_wordlist.main(["--in", str(dat), "--out", str(back), "--to", "text"])
    assert back.read_text(encoding="utf-8").splitlines() == ["crane", "hållö"]
