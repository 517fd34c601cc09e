from typer.testing import CliRunner
from phrasepick.cli import _show_match_panel, app

runner = CliRunner()

def run_pick(keys: list[str], *args: str):
    return runner.invoke(app, ["pick", "--offline", *args], input="\n".join(keys) + "\n")

def test_matches_command():
    result = runner.invoke(app, ["matches", "ab", "--offline"])
    assert result.exit_code == 0
    assert "10 matches" in result.output
    assert "abandon" in result.output
    assert "next: a i l o s u" in result.output

def test_matches_command_with_wordlist(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("zoo\nzone\nzero\n", encoding="utf-8")
    result = runner.invoke(app, ["matches", "zo", "--wordlist", str(path)])
    assert result.exit_code == 0
    assert "2 matches" in result.output
    assert "next: n o" in result.output

def test_pick_confirms_word():
    result = run_pick(["a", "b", "l", "1", "done"], "--capacity", "2")
    assert result.exit_code == 0
    assert "Phrase has 1 of 2 words" in result.output
    assert result.output.rstrip().endswith("able")

def test_pick_stops_at_capacity():
    result = run_pick(["a", "b", "l", "1", "z", "done"], "--capacity", "1")
    assert result.exit_code == 0
    assert "MAXIMUM WORDS REACHED" in result.output
    assert "Already holding the maximum of 1 words" in result.output
    assert result.output.rstrip().endswith("able")

def test_pick_remove_and_backspace():
    keys = ["a", "b", "l", "1", "a", "c", "x", "-", "t", "1", "rm 1", "done"]
    result = run_pick(keys, "--capacity", "3")
    assert result.exit_code == 0
    assert result.output.rstrip().endswith("act")

def test_pick_reports_bad_input():
    result = run_pick(["rm 4", "rm x", "9", "??"])
    assert result.exit_code == 0
    assert "No confirmed word at position 3" in result.output
    assert "Usage: rm N" in result.output
    assert "No match numbered 9" in result.output
    assert "Unknown input" in result.output
    assert "No words selected." in result.output

def test_pick_clear():
    result = run_pick(["a", "b", "l", "1", "clear", "q"])
    assert result.exit_code == 0
    assert "No words selected." in result.output

def test_match_panel_throttle():
    assert not _show_match_panel("", [])
    assert _show_match_panel("a", ["able"] * 40)
    assert not _show_match_panel("a", ["able"] * 41)
    assert _show_match_panel("ab", ["able"] * 100)

def test_markup_in_prefix_is_printed_literally():
    result = runner.invoke(app, ["matches", "[/bold]", "--offline"])
    assert result.exit_code == 0
    assert "[/bold]: 0 matches" in result.output

def test_markup_in_words_is_printed_literally(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("[zoo]\n[/red]\n", encoding="utf-8")
    result = runner.invoke(app, ["matches", "[", "--wordlist", str(path)])
    assert result.exit_code == 0
    assert "2 matches" in result.output
    assert "[zoo]" in result.output
    assert "[/red]" in result.output
    assert "next: / z" in result.output
