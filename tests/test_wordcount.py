import pytest

from consolekit.wordcount import count_words, count_words_in_file, main


def test_count_words_mixed_whitespace():
    assert count_words(["hello world\n", "  a\tb  \n", "\n"]) == 4


def test_count_words_empty():
    assert count_words([]) == 0


@pytest.mark.parametrize("text", ["one two three", "  leading", "a\n\nb c\n\t d\n", ""])
def test_count_words_matches_split_of_whole_text(text):
    assert count_words(text.splitlines(keepends=True)) == len(text.split())


def test_count_words_is_additive():
    first = ["alpha beta\n"]
    second = ["gamma\n", "delta epsilon zeta\n"]
    assert count_words(first + second) == count_words(first) + count_words(second)


def test_count_words_in_file(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_text("the quick brown\nfox\n\n  jumps  \n", encoding="utf-8")
    assert count_words_in_file(path) == len(path.read_text(encoding="utf-8").split())


def test_count_words_in_missing_file(tmp_path):
    with pytest.raises(OSError):
        count_words_in_file(tmp_path / "absent.txt")


def test_main_prints_total(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("a b c\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == "Total word count: 3"


def test_main_prompts_for_filename(tmp_path, monkeypatch, capsys):
    path = tmp_path / "words.txt"
    path.write_text("x y\n", encoding="utf-8")
    monkeypatch.setattr("builtins.input", lambda prompt="": str(path))
    assert main([]) == 0
    assert "Total word count: 2" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "nope.txt"
    assert main([str(missing)]) == 1
    assert f"Could not open file: {missing}" in capsys.readouterr().err