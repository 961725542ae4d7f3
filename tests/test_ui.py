import pytest

from rustdrills import ui


def test_no_emoji_reflects_environment(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.no_emoji() is True
    monkeypatch.delenv("NO_EMOJI")
    assert ui.no_emoji() is False


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    line = ui.warn("Ran thing with errors")
    out = capsys.readouterr().out
    assert "Ran thing with errors" in out
    assert "!" in out
    assert "⚠" not in out
    assert out.rstrip("\n") == line


def test_warn_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.warn("Compiling failed")
    out = capsys.readouterr().out
    assert "⚠️" in out
    assert "Compiling failed" in out


@pytest.mark.parametrize(
    "env, symbol",
    [(True, "✓"), (False, "✅")],
)
def test_success_prefix(monkeypatch, capsys, env, symbol):
    if env:
        monkeypatch.setenv("NO_EMOJI", "1")
    else:
        monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.success("Successfully ran ex")
    out = capsys.readouterr().out
    assert symbol in out
    assert "Successfully ran ex" in out