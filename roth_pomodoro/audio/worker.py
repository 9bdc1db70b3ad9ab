"""Background audio worker.

The worker thread owns the output device.  The rest of the app only ever
calls :meth:`AudioWorker.send`; nothing comes back.  Commands run one at a
time in the order they were sent.

An ALARM blocks the worker for about five seconds, so a STOP sent while it
plays is only picked up afterwards.  STOP halts buffered output through
the player; it never cuts an alarm short.
"""

from __future__ import annotations

import logging
import queue
import threading
import time
from enum import Enum
from typing import Callable, Protocol

logger = logging.getLogger(__name__)

POLL_INTERVAL = 0.25  # seconds between queue polls


class AudioCommand(Enum):
    ALARM = "alarm"
    STOP = "stop"


class AudioChannelClosedError(RuntimeError):
    """Raised by :meth:`AudioWorker.send` once the worker has shut down."""


class Player(Protocol):
    def play(self, samples, sample_rate: int) -> None: ...

    def stop(self) -> None: ...


class SoundDevicePlayer:
    """Plays numpy buffers on the default output device via sounddevice.

    Construct it on the worker thread: the constructor opens PortAudio and
    raises ``OSError`` (or ``sounddevice.PortAudioError``) when no output
    device is usable.
    """

    def __init__(self) -> None:
        import sounddevice as sd

        sd.query_devices(kind="output")
        self._sd = sd

    def play(self, samples, sample_rate: int) -> None:
        self._sd.play(samples, sample_rate)

    def stop(self) -> None:
        self._sd.stop()


class AudioWorker(threading.Thread):
    """Daemon thread that executes :class:`AudioCommand` s from a queue.

    Usage::

        worker = AudioWorker()
        worker.start()
        worker.send(AudioCommand.ALARM)
        ...
        worker.shutdown()
    """

    def __init__(
        self,
        *,
        player_factory: Callable[[], Player] = SoundDevicePlayer,
        poll_interval: float = POLL_INTERVAL,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        super().__init__(name="audio-worker", daemon=True)
        self._commands: queue.Queue[AudioCommand] = queue.Queue()
        self._player_factory = player_factory
        self._poll_interval = poll_interval
        self._sleep = sleep
        self._closed = threading.Event()
        self._player: Player | None = None

    # ── public API ────────────────────────────────────────────────────

    def send(self, command: AudioCommand) -> None:
        """Queue *command* without waiting for it to run."""
        if self._closed.is_set():
            raise AudioChannelClosedError(f"audio worker is shut down; dropped {command.value}")
        self._commands.put(command)

    def shutdown(self, timeout: float | None = None) -> None:
        """Close the channel and wait (up to *timeout*) for the thread."""
        self._closed.set()
        if self.is_alive():
            self.join(timeout)

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    @property
    def has_device(self) -> bool:
        return self._player is not None

    # ── thread body ───────────────────────────────────────────────────

    def run(self) -> None:
        try:
            self._player = self._player_factory()
        except Exception:
            # No device: keep draining so senders never block or fail.
            logger.exception("Could not open audio output; alarms will be silent")
            self._player = None

        while not self._closed.is_set():
            try:
                command = self._commands.get_nowait()
            except queue.Empty:
                pass
            else:
                self.process(command)
            self._sleep(self._poll_interval)

    def process(self, command: AudioCommand) -> None:
        """Run one command on the current thread."""
        if self._player is None:
            logger.debug("No audio device, skipping %s", command.value)
            return
        logger.debug("Audio command: %s", command.value)
        try:
            if command is AudioCommand.ALARM:
                self._play_alarm()
            elif command is AudioCommand.STOP:
                self._player.stop()
        except Exception:
            logger.exception("Audio command %s failed", command.value)

    def _play_alarm(self) -> None:
        from .sounds import SAMPLE_RATE, alarm_tones

        for samples, pause in alarm_tones():
            self._player.play(samples, SAMPLE_RATE)
            self._sleep(pause)
