from __future__ import annotations

import io
import logging
from collections import namedtuple
from pathlib import Path

import pygame

from . import config

log = logging.getLogger(__name__)

Clips = namedtuple("Clips", ["eat", "game_over", "music"])
# Raw encoded bytes; each playback decodes its own copy.


class AssetError(RuntimeError):
    pass


def decode(data: bytes, mixer=pygame.mixer):
    return mixer.Sound(file=io.BytesIO(data))


def read_clip(directory: Path, name: str, mixer=pygame.mixer) -> bytes:
    path = Path(directory) / name
    try:
        data = path.read_bytes()
    except OSError as e:
        raise AssetError(f"error reading sound file {path}: {e}") from e
    try:
        decode(data, mixer)
    except pygame.error as e:
        raise AssetError(f"error decoding sound file {path}: {e}") from e
    log.debug("loaded %s (%d bytes)", path, len(data))
    return data


def load_clips(directory: Path = config.ASSETS_DIR, mixer=pygame.mixer) -> Clips:
    """Read and check all three sound files. Any failure is an ``AssetError``."""
    return Clips(
        eat=read_clip(directory, config.EAT_SOUND, mixer),
        game_over=read_clip(directory, config.GAME_OVER_SOUND, mixer),
        music=read_clip(directory, config.MUSIC, mixer),
    )
