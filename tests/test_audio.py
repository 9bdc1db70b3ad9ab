"""Tests for alarm synthesis and the background audio worker.

No real sound device is touched: the worker gets a FakePlayer and a
recording sleep function.
"""

from __future__ import annotations

import threading
import time

import numpy as np
import pytest

from roth_pomodoro.audio.sounds import (
    ALARM_AMPLITUDE, ALARM_FREQUENCIES, ALARM_PAUSES, SAMPLE_RATE,
    _make_envelope, alarm_tones, sine,
)
from roth_pomodoro.audio.worker import (
    AudioChannelClosedError, AudioCommand, AudioWorker, POLL_INTERVAL,
)

from helpers import FakePlayer


def wait_for(predicate, timeout: float = 2.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


# ═══════════════════════════════════════════════════════════════════════
#  SYNTHESIS
# ═══════════════════════════════════════════════════════════════════════


class TestSynthesis:
    def test_sine_length(self):
        assert len(sine(440.0, 0.5)) == SAMPLE_RATE // 2

    def test_envelope_fades_in_and_out(self):
        env = _make_envelope(1000, attack=100, release=100)
        assert env[0] == pytest.approx(0.0)
        assert env[-1] == pytest.approx(0.0)
        assert env[500] == pytest.approx(1.0)

    def test_envelope_shorter_than_fades(self):
        env = _make_envelope(50, attack=100, release=100)
        assert len(env) == 50
        assert env.max() <= 1.0

    def test_three_tones(self):
        steps = alarm_tones()
        assert len(steps) == 3
        assert [pause for _, pause in steps] == list(ALARM_PAUSES)

    def test_about_five_seconds(self):
        assert sum(ALARM_PAUSES) == pytest.approx(5.0)

    def test_tones_are_half_a_second_and_quiet(self):
        for samples, _ in alarm_tones():
            assert samples.dtype == np.float32
            assert len(samples) == int(SAMPLE_RATE * 0.5)
            assert np.abs(samples).max() <= ALARM_AMPLITUDE + 1e-6

    def test_pitch_rises(self):
        peaks = []
        for samples, _ in alarm_tones():
            spectrum = np.abs(np.fft.rfft(samples))
            peaks.append(np.argmax(spectrum) * SAMPLE_RATE / len(samples))
        assert peaks == sorted(peaks)
        assert peaks == pytest.approx(list(ALARM_FREQUENCIES), abs=2.0)


# ═══════════════════════════════════════════════════════════════════════
#  WORKER: single commands
# ═══════════════════════════════════════════════════════════════════════


class TestProcess:
    def _worker(self, player):
        sleeps: list[float] = []
        worker = AudioWorker(player_factory=lambda: player, sleep=sleeps.append)
        worker._player = player
        return worker, sleeps

    def test_alarm_plays_three_tones(self):
        player = FakePlayer()
        worker, sleeps = self._worker(player)
        worker.process(AudioCommand.ALARM)
        assert [c[0] for c in player.calls] == ["play", "play", "play"]
        assert all(c[2] == SAMPLE_RATE for c in player.calls)
        assert sleeps == list(ALARM_PAUSES)

    def test_stop_stops_player(self):
        player = FakePlayer()
        worker, _ = self._worker(player)
        worker.process(AudioCommand.STOP)
        assert player.calls == [("stop",)]

    def test_playback_error_is_logged(self, caplog):
        worker, _ = self._worker(FakePlayer(fail=True))
        worker.process(AudioCommand.ALARM)
        assert "Audio command alarm failed" in caplog.text

    def test_no_device_is_silent(self):
        worker = AudioWorker(player_factory=FakePlayer)
        worker.process(AudioCommand.ALARM)  # no player yet: nothing happens
        assert worker.has_device is False


# ═══════════════════════════════════════════════════════════════════════
#  WORKER: thread
# ═══════════════════════════════════════════════════════════════════════


class TestWorkerThread:
    def test_defaults(self):
        worker = AudioWorker()
        assert worker.daemon is True
        assert POLL_INTERVAL > 0.1  # coarser than the 100 ms tick

    def test_commands_run_in_order(self):
        player = FakePlayer()
        worker = AudioWorker(
            player_factory=lambda: player,
            poll_interval=0.001,
            sleep=lambda s: time.sleep(0.001),
        )
        worker.start()
        try:
            worker.send(AudioCommand.ALARM)
            worker.send(AudioCommand.STOP)
            worker.send(AudioCommand.STOP)
            assert wait_for(lambda: len(player.calls) == 5)
        finally:
            worker.shutdown(timeout=2.0)
        assert [c[0] for c in player.calls] == ["play", "play", "play", "stop", "stop"]
        assert not worker.is_alive()

    def test_one_command_per_poll(self):
        player = FakePlayer()
        polls = threading.Event()
        gate = threading.Event()

        def sleep(seconds):
            polls.set()
            gate.wait(2.0)
            gate.clear()

        worker = AudioWorker(player_factory=lambda: player, poll_interval=0.0, sleep=sleep)
        worker.send(AudioCommand.STOP)
        worker.send(AudioCommand.STOP)
        worker.start()
        try:
            assert polls.wait(2.0)
            assert player.calls == [("stop",)]
        finally:
            worker._closed.set()
            gate.set()
            worker.join(2.0)

    def test_send_does_not_block(self):
        worker = AudioWorker(player_factory=FakePlayer)
        start = time.monotonic()
        for _ in range(100):
            worker.send(AudioCommand.ALARM)
        assert time.monotonic() - start < 0.5

    def test_send_after_shutdown_raises(self):
        worker = AudioWorker(player_factory=FakePlayer)
        worker.shutdown()
        assert worker.closed
        with pytest.raises(AudioChannelClosedError):
            worker.send(AudioCommand.STOP)

    def test_device_failure_keeps_app_alive(self, caplog):
        def no_device():
            raise OSError("PortAudio library not found")

        worker = AudioWorker(player_factory=no_device, poll_interval=0.001)
        worker.start()
        try:
            assert wait_for(lambda: "Could not open audio output" in caplog.text)
            worker.send(AudioCommand.ALARM)
            worker.send(AudioCommand.STOP)
            assert worker.is_alive()
            assert worker.has_device is False
        finally:
            worker.shutdown(timeout=2.0)
