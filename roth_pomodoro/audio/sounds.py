"""Alarm synthesis with numpy.

The alarm is three sine tones of rising pitch, each half a second long and
followed by a pause, about five seconds end to end.  Samples are float32
in ``-1..1`` at :data:`SAMPLE_RATE`, ready for ``sounddevice.play``.
"""

from __future__ import annotations

import numpy as np


SAMPLE_RATE = 44100

ALARM_FREQUENCIES = (240.0, 340.0, 440.0)   # Hz, ascending
ALARM_TONE_SECONDS = 0.5
ALARM_PAUSES = (1.0, 1.0, 3.0)              # sleep after starting each tone
ALARM_AMPLITUDE = 0.20


def _make_envelope(length: int, attack: int = 220, release: int = 660) -> np.ndarray:
    """Linear fade in/out (durations in samples) so tones start and end
    without a click."""
    env = np.ones(length, dtype=np.float32)
    a = min(attack, length)
    if a > 0:
        env[:a] = np.linspace(0.0, 1.0, a, dtype=np.float32)
    r = min(release, length - a)
    if r > 0:
        env[length - r:] = np.linspace(1.0, 0.0, r, dtype=np.float32)
    return env


def sine(freq: float, duration_s: float, amplitude: float = 1.0) -> np.ndarray:
    """Pure sine wave at *freq* Hz for *duration_s* seconds."""
    t = np.linspace(0, duration_s, int(SAMPLE_RATE * duration_s), endpoint=False)
    return (amplitude * np.sin(2 * np.pi * freq * t)).astype(np.float32)


def alarm_tones() -> list[tuple[np.ndarray, float]]:
    """The alarm as ``(samples, pause_after_s)`` steps."""
    steps = []
    for freq, pause in zip(ALARM_FREQUENCIES, ALARM_PAUSES):
        tone = sine(freq, ALARM_TONE_SECONDS, ALARM_AMPLITUDE)
        steps.append((tone * _make_envelope(len(tone)), pause))
    return steps
