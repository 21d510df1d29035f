from __future__ import annotations

from typing import Dict, Iterable, Sequence, Tuple

import pygame
from loguru import logger

from .motion import clamp

SAMPLE_RATE = 22050

# (frequency Hz, duration s, volume 0-1, fade out)
Tone = Tuple[float, float, float, bool]

CUES: Dict[str, Sequence[Tone]] = {
    "launch": ((1200, 0.08, 0.5, True),),
    "detonation": ((220, 0.18, 0.7, True), (110, 0.22, 0.6, True)),
    "kill": ((620, 0.06, 0.55, False), (310, 0.12, 0.5, True)),
    "impact": ((180, 0.16, 0.8, False), (70, 0.28, 0.85, True)),
    "start": ((360, 0.12, 0.6, False), (540, 0.12, 0.6, False), (720, 0.18, 0.5, True)),
    "won": ((523, 0.14, 0.6, False), (659, 0.14, 0.6, False), (784, 0.3, 0.6, True)),
    "lost": ((260, 0.28, 0.75, True), (150, 0.32, 0.7, True)),
}


def build_tone_buffer(sequence: Iterable[Tone], sample_rate: int = SAMPLE_RATE) -> bytes:
    """Render a run of square-wave tones as unsigned 8-bit mono samples."""
    buffer = bytearray()
    for frequency, duration, volume, fade in sequence:
        total_samples = max(1, int(sample_rate * duration))
        amplitude = int(127 * clamp(volume, 0.0, 1.0))
        if frequency <= 0:
            buffer.extend([128] * total_samples)
            continue
        half_period = max(1, int(sample_rate / frequency) // 2)
        for i in range(total_samples):
            level = int(amplitude * (1 - i / total_samples)) if fade else amplitude
            sign = 1 if (i // half_period) % 2 == 0 else -1
            buffer.append(int(clamp(128 + sign * level, 0, 255)))
    return bytes(buffer)


class SoundBoard:
    """Plays a short cue for each simulation event; stays silent if the mixer is unavailable."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = False
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        if enabled:
            self._load()

    def _load(self) -> None:
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(SAMPLE_RATE, 8, 1, 256)
            self.sounds = {name: pygame.mixer.Sound(buffer=build_tone_buffer(tones)) for name, tones in CUES.items()}
        except pygame.error as exc:
            logger.warning(f"Audio disabled: {exc}")
            self.sounds = {}
            return
        self.enabled = True

    def play(self, cue: str) -> None:
        if not self.enabled:
            return
        sound = self.sounds.get(cue)
        if sound:
            sound.play()

    def play_events(self, events: Iterable[dict]) -> None:
        for event in events:
            kind = event["type"]
            if kind == "detonation":
                self.play("detonation")
            elif kind == "rocket_destroyed":
                self.play("kill")
            elif kind == "impact":
                self.play("impact")
            elif kind == "state_changed":
                self.play(event["new"].value)
