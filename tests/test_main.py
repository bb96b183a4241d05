import pytest
from fastapi.testclient import TestClient

import api
from controller import GameController
from engine import GuessGameEngine
from main import auto_demo_play, interactive_play, parse_args
from transport import GuessTransport

class FixedRng:
    def __init__(self, value): self.value = value
    def randint(self, a, b): return self.value

def _controller(monkeypatch, target):
    monkeypatch.setattr(api, "_engine", GuessGameEngine(rng=FixedRng(target)))
    return GameController(GuessTransport(base_url="http://testserver", session=TestClient(api.app)))

@pytest.mark.parametrize("target", [0, 375, 1000])
def test_auto_demo_bisects_to_correct(monkeypatch, target):
    ctrl = _controller(monkeypatch, target)
    used = auto_demo_play(ctrl)
    assert used is not None and used <= 10
    assert ctrl.state.finished is True

def test_interactive_play(monkeypatch, capsys):
    ctrl = _controller(monkeypatch, 7)
    lines = iter(["abc", "8", "n", "7", "q"])
    interactive_play(ctrl, read=lambda prompt: next(lines))
    out = capsys.readouterr().out
    assert "[ERROR] Enter an integer between 0 and 1000" in out
    assert "Too High. Total guess 1" in out
    assert "Game reset. Counter set to 0." in out
    assert "Correct. Total guess 1" in out

def test_parse_args_play():
    args = parse_args(["play", "--base-url", "http://x", "--auto-demo"])
    assert args.cmd == "play"
    assert args.base_url == "http://x"
    assert args.auto_demo is True

def test_missing_command_is_rejected_by_argparse():
    with pytest.raises(SystemExit):
        parse_args([])
