"""Tests for the interactive terminal client."""

import requests

from app.api import main as terminal
from app.llm.provider_config import Settings


def feed_input(monkeypatch, lines):
    answers = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_prints_bullets_and_quits(monkeypatch, capsys, settings, fake_post):
    feed_input(monkeypatch, ["", "tomato leaf spots", "exit"])

    terminal.main(settings)

    out = capsys.readouterr().out
    assert "- Wear gloves\n- Remove leaves" in out
    assert "Shutting down." in out
    assert len(fake_post.calls) == 1


def test_each_question_is_single_turn(monkeypatch, settings, fake_post):
    feed_input(monkeypatch, ["first", "second"])

    terminal.main(settings)

    assert len(fake_post.calls) == 2
    second_contents = fake_post.calls[1]["json"]["contents"]
    assert len(second_contents) == 2
    assert second_contents[1]["parts"][0]["text"] == "second"


def test_errors_do_not_end_session(monkeypatch, capsys, settings, fake_post):
    fake_post.error = requests.exceptions.ConnectionError("offline")
    feed_input(monkeypatch, ["why yellow leaves", "quit"])

    terminal.main(settings)

    out = capsys.readouterr().out
    assert "Error: Gemini request failed: offline" in out
    assert "Shutting down." in out


def test_missing_key_reported(monkeypatch, capsys, fake_post):
    feed_input(monkeypatch, ["blight"])

    terminal.main(Settings(api_key=None))

    assert "Error: Missing Gemini API key" in capsys.readouterr().out
    assert fake_post.calls == []


def test_render_bullets():
    assert terminal.render_bullets(["a", "b"]) == "- a\n- b"
