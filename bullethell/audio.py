"""Sound effects and background music."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

logger = logging.getLogger(__name__)

SOUND_DIR = Path("assets/sound")
SOUND_NAMES = (
    "death",
    "explosion",
    "gameover",
    "laser",
    "laser2",
    "nextLevel",
    "startgame",
    "win",
)


def _unit(value: float) -> float:
    return min(max(float(value), 0.0), 1.0)


class AudioManager:
    """Plays named sound effects and one looping music track."""

    def __init__(self) -> None:
        self._sounds: dict[str, pygame.mixer.Sound] = {}
        self._sound_volume = 0.05
        self._music_volume = 0.1
        self._mixer_ready = False
        self._music_loaded = False
        self._music_playing = False

    def init(self) -> None:
        """Open the audio device and load the sound effects."""
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            logger.warning("audio device unavailable: %s", exc)
            return
        self._mixer_ready = True
        for name in SOUND_NAMES:
            path = SOUND_DIR / f"{name}.wav"
            try:
                sound = pygame.mixer.Sound(str(path))
            except (pygame.error, OSError) as exc:
                logger.warning("could not load sound %s: %s", path, exc)
                continue
            sound.set_volume(self._sound_volume)
            self._sounds[name] = sound

    def update(self) -> None:
        """Keep the music track looping."""
        if self._music_playing and not pygame.mixer.music.get_busy():
            pygame.mixer.music.play(-1)

    def unload(self) -> None:
        """Release every sound, the music and the audio device."""
        for sound in self._sounds.values():
            sound.stop()
        self._sounds.clear()
        if self._music_loaded:
            pygame.mixer.music.stop()
            pygame.mixer.music.unload()
            self._music_loaded = False
            self._music_playing = False
        if self._mixer_ready:
            pygame.mixer.quit()
            self._mixer_ready = False

    def play_sound(self, name: str) -> bool:
        """Play a loaded effect; returns whether one was found."""
        sound = self._sounds.get(name)
        if sound is None:
            return False
        sound.play()
        return True

    def play_music(self, path: str) -> bool:
        """Replace the current track with the one at path and loop it."""
        if not self._mixer_ready:
            return False
        if self._music_loaded:
            pygame.mixer.music.stop()
            pygame.mixer.music.unload()
            self._music_loaded = False
            self._music_playing = False
        try:
            pygame.mixer.music.load(str(path))
        except pygame.error as exc:
            logger.warning("could not load music %s: %s", path, exc)
            return False
        pygame.mixer.music.play(-1)
        pygame.mixer.music.set_volume(self._music_volume)
        self._music_loaded = True
        self._music_playing = True
        return True

    def stop_music(self) -> None:
        """Stop the current track, if any."""
        if self._music_loaded:
            pygame.mixer.music.stop()
            self._music_playing = False

    @property
    def sound_volume(self) -> float:
        """Volume of sound effects, between 0 and 1."""
        return self._sound_volume

    @sound_volume.setter
    def sound_volume(self, volume: float) -> None:
        self._sound_volume = _unit(volume)
        for sound in self._sounds.values():
            sound.set_volume(self._sound_volume)

    @property
    def music_volume(self) -> float:
        """Volume of the music track, between 0 and 1."""
        return self._music_volume

    @music_volume.setter
    def music_volume(self, volume: float) -> None:
        self._music_volume = _unit(volume)
        if self._music_loaded:
            pygame.mixer.music.set_volume(self._music_volume)


_AUDIO = AudioManager()


def get_audio() -> AudioManager:
    """Return the audio manager shared by the whole game."""
    return _AUDIO