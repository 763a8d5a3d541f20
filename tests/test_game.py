"""Startup failures in the frame driver end the process with status 1."""

import logging

import pygame
import pytest

from snake_arcade import config, game
from snake_arcade.assets import Clips


def no_mixer():
    pass


def broken_mixer():
    raise pygame.error("No available audio device")


def broken_display(size):
    raise pygame.error("No available video device")


def run_main(caplog):
    caplog.set_level(logging.INFO)
    with pytest.raises(SystemExit) as exc:
        game.main()
    assert exc.value.code == 1
    (record,) = [r for r in caplog.records if r.levelno == logging.CRITICAL]
    return record.getMessage()


class TestStartupFailure:
    def test_missing_assets(self, monkeypatch, tmp_path, caplog):
        monkeypatch.setattr(game, "open_mixer", no_mixer)
        monkeypatch.setattr(config, "ASSETS_DIR", tmp_path)
        message = run_main(caplog)
        assert message.startswith("startup failed")
        assert config.EAT_SOUND in message

    def test_no_audio_device(self, monkeypatch, caplog):
        monkeypatch.setattr(game, "open_mixer", broken_mixer)
        assert "No available audio device" in run_main(caplog)

    def test_no_window(self, monkeypatch, caplog):
        monkeypatch.setattr(game, "open_mixer", no_mixer)
        monkeypatch.setattr(game, "load_clips", lambda directory: Clips(b"eat", b"over", b"music"))
        monkeypatch.setattr(pygame.display, "set_mode", broken_display)
        assert "No available video device" in run_main(caplog)
