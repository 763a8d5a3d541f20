from __future__ import annotations

import os
from pathlib import Path

WIDTH, HEIGHT = 640, 480
CELL = 20
GRID_WIDTH = WIDTH // CELL
GRID_HEIGHT = HEIGHT // CELL
FPS = 60
TITLE = "Snake Game"

# Seconds between snake moves, independent of FPS.
MOVE_INTERVAL = 0.1

START_SNAKE = ((300, 240), (280, 240), (260, 240))
FOOD_SCORE = 10

PARTICLE_LIFE = 30
PARTICLE_COUNT = 30
PARTICLE_MAX_SPEED = 1.25
PARTICLE_COLOR = (255, 215, 0, 255)

BG_COLOR = (40, 40, 40)
GAME_OVER_BG_COLOR = (255, 0, 0)
HEAD_COLOR = (0, 255, 0)
BODY_COLOR = (0, 150, 0)
FOOD_COLOR = (255, 0, 0)
TEXT_COLOR = (255, 255, 255)
FONT_SIZE = 20

ASSETS_DIR = Path(os.environ.get("SNAKE_ARCADE_ASSETS", "."))
EAT_SOUND = "eat-food.mp3"
GAME_OVER_SOUND = "game-over.mp3"
MUSIC = "background.mp3"

MIXER_FREQUENCY = 44100
MIXER_SIZE = -16
MIXER_CHANNELS = 2
MIXER_BUFFER = 4096

EAT_VOLUME = 0.1
GAME_OVER_VOLUME = 1.0
MUSIC_VOLUME = 0.1
