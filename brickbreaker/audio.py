"""Synthesised sound effects.

Each ``ToneKind`` maps to one or more notes of ``(frequency, seconds,
waveform)``. Notes start at ``PEAK_GAIN`` and decay exponentially to
``FLOOR_GAIN`` over their duration. Samples are built with numpy and handed
to ``pygame.sndarray``; if the mixer is unavailable the player stays silent.
"""

import enum
import logging

import numpy as np
import pygame

logger = logging.getLogger(__name__)

PEAK_GAIN = 0.5
FLOOR_GAIN = 0.001


class ToneKind(enum.Enum):
    BRICK = "brick"
    WALL = "wall"
    PADDLE = "paddle"
    LOSE_LIFE = "loseLife"
    GAME_OVER = "gameOver"
    WIN = "win"


class Waveform(enum.Enum):
    SINE = "sine"
    SQUARE = "square"
    TRIANGLE = "triangle"
    SAWTOOTH = "sawtooth"


TONE_TABLE = {
    ToneKind.PADDLE: [(261.63, 0.1, Waveform.SQUARE)],
    ToneKind.BRICK: [(523.25, 0.05, Waveform.SINE)],
    ToneKind.WALL: [(110.0, 0.05, Waveform.TRIANGLE)],
    ToneKind.LOSE_LIFE: [(130.81, 0.3, Waveform.SAWTOOTH)],
    ToneKind.GAME_OVER: [
        (174.61, 0.15, Waveform.SAWTOOTH),
        (164.81, 0.15, Waveform.SAWTOOTH),
        (155.56, 0.15, Waveform.SAWTOOTH),
        (146.83, 0.2, Waveform.SAWTOOTH),
    ],
    ToneKind.WIN: [
        (523.25, 0.1, Waveform.SAWTOOTH),
        (659.25, 0.1, Waveform.SAWTOOTH),
        (783.99, 0.1, Waveform.SAWTOOTH),
        (1046.50, 0.2, Waveform.SAWTOOTH),
    ],
}


def oscillate(waveform, frequency, t):
    phase = frequency * t
    if waveform is Waveform.SINE:
        return np.sin(2 * np.pi * phase)
    if waveform is Waveform.SQUARE:
        return np.where(np.sin(2 * np.pi * phase) >= 0, 1.0, -1.0)
    if waveform is Waveform.SAWTOOTH:
        return 2.0 * (phase - np.floor(phase + 0.5))
    if waveform is Waveform.TRIANGLE:
        return 2.0 * np.abs(2.0 * (phase - np.floor(phase + 0.5))) - 1.0
    raise ValueError(f"Unknown waveform: {waveform!r}")


def synthesize_note(frequency, duration, waveform, sample_rate):
    n = int(sample_rate * duration)
    t = np.arange(n) / sample_rate
    envelope = PEAK_GAIN * (FLOOR_GAIN / PEAK_GAIN) ** (t / duration)
    return oscillate(waveform, frequency, t) * envelope


def synthesize(notes, sample_rate=44100):
    """Render a note sequence back to back as 16-bit mono samples."""
    wave = np.concatenate([
        synthesize_note(freq, duration, waveform, sample_rate)
        for freq, duration, waveform in notes
    ])
    return np.int16(np.clip(wave, -1.0, 1.0) * 32767)


class TonePlayer:
    def __init__(self, enabled=True, sample_rate=44100):
        self.sample_rate = sample_rate
        self.enabled = enabled
        self._channels = 1
        self._sounds = {}

        if not enabled:
            return
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=sample_rate, size=-16, channels=2, buffer=512)
            self.sample_rate, _, self._channels = pygame.mixer.get_init()
        except pygame.error as e:
            # Audio can fail in headless environments; the game runs silent.
            logger.warning("Sound disabled, mixer unavailable: %s", e)
            self.enabled = False

    def _sound(self, kind):
        sound = self._sounds.get(kind)
        if sound is None:
            samples = synthesize(TONE_TABLE[kind], self.sample_rate)
            if self._channels > 1:
                samples = np.column_stack([samples] * self._channels)
            sound = pygame.sndarray.make_sound(np.ascontiguousarray(samples))
            self._sounds[kind] = sound
        return sound

    def play(self, kind):
        if not self.enabled:
            return
        try:
            self._sound(kind).play()
        except pygame.error as e:
            logger.warning("Could not play %s: %s", kind.value, e)

    def suspend(self):
        if self.enabled:
            pygame.mixer.pause()

    def resume(self):
        if self.enabled:
            pygame.mixer.unpause()
