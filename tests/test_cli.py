from corabia.cli import main


def feed(monkeypatch, answers):
    replies = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(replies)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_exit_option(monkeypatch, capsys):
    feed(monkeypatch, ["2"])
    assert main() == 0
    out = capsys.readouterr().out
    assert "=== Meniu Principal ===" in out
    assert "La revedere!" in out


def test_invalid_options(monkeypatch, capsys):
    feed(monkeypatch, ["3", "abc", "2"])
    assert main() == 0
    out = capsys.readouterr().out
    assert out.count("Optiune invalida! Incearca din nou.") == 2


def test_start_with_no_players(monkeypatch, capsys):
    feed(monkeypatch, ["1", "0", "2"])
    assert main() == 0
    out = capsys.readouterr().out
    assert "Jocul trebuie sa contina minim 2 jucatori" in out
    assert "La revedere!" in out


def test_end_of_input(monkeypatch, capsys):
    feed(monkeypatch, [])
    assert main() == 0
    assert "La revedere!" not in capsys.readouterr().out