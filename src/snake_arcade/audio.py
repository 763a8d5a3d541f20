from __future__ import annotations

import io
import logging
import threading
import time

import pygame

from . import config
from .assets import Clips, decode
from .state import TickResult

log = logging.getLogger(__name__)


def open_mixer(mixer=pygame.mixer) -> None:
    mixer.init(
        frequency=config.MIXER_FREQUENCY,
        size=config.MIXER_SIZE,
        channels=config.MIXER_CHANNELS,
        buffer=config.MIXER_BUFFER,
    )


class AudioPlayer:
    """Plays tick events on background threads and streams the background track.

    Every effect decodes its own ``Sound`` from the clip bytes and stops it
    when the clip ends, so nothing here ever blocks the frame driver. The
    background track loops on ``mixer.music`` until ``close``.
    """

    def __init__(self, clips: Clips, mixer=pygame.mixer, poll: float = 0.001):
        self.clips = clips
        self.mixer = mixer
        self.poll = poll
        self._stop = threading.Event()
        self._music_file: io.BytesIO | None = None

    def handle(self, result: TickResult) -> None:
        if result.ate_food:
            self.play(self.clips.eat, config.EAT_VOLUME)
        if result.game_over:
            self.play(self.clips.game_over, config.GAME_OVER_VOLUME)

    def play(self, data: bytes, volume: float) -> threading.Thread:
        t = threading.Thread(target=self.play_clip, args=(data, volume), daemon=True)
        t.start()
        return t

    def play_clip(self, data: bytes, volume: float) -> bool:
        """Play one clip to the end on the calling thread. False if it could not play."""
        try:
            sound = decode(data, self.mixer)
        except pygame.error as e:
            log.error("error decoding sound: %s", e)
            return False

        try:
            sound.set_volume(volume)
            channel = sound.play()
            if channel is None:
                log.error("no free mixer channel, sound dropped")
                return False
            while channel.get_busy() and not self._stop.is_set():
                time.sleep(self.poll)
        except pygame.error as e:
            log.error("error playing sound: %s", e)
            return False
        finally:
            sound.stop()
        return True

    def start_music(self) -> bool:
        """Loop the background track forever. False if it could not start."""
        self._stop.clear()
        # The music stream reads from this buffer for as long as it plays.
        self._music_file = io.BytesIO(self.clips.music)
        try:
            self.mixer.music.load(self._music_file, "mp3")
            self.mixer.music.set_volume(config.MUSIC_VOLUME)
            self.mixer.music.play(loops=-1)
        except pygame.error as e:
            log.error("error playing background music: %s", e)
            self._music_file = None
            return False
        log.info("background music playing")
        return True

    def close(self) -> None:
        self._stop.set()
        if self._music_file is not None:
            self.mixer.music.stop()
            self._music_file = None
