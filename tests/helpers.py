"""Shared test helpers for Roth Pomodoro."""

from roth_pomodoro.audio.worker import AudioChannelClosedError
from roth_pomodoro.timer.engine import AppState, StartStop, Tick, update


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class FakeAudio:
    """Stands in for AudioWorker: records commands, never plays anything."""

    def __init__(self):
        self.sent: list = []
        self.closed = False
        self.started = False

    def send(self, command):
        if self.closed:
            raise AudioChannelClosedError(command.value)
        self.sent.append(command)

    def start(self):
        self.started = True

    def is_alive(self):
        return self.started and not self.closed

    def shutdown(self, timeout=None):
        self.closed = True


class FakePlayer:
    """Records play/stop calls made by the audio worker."""

    def __init__(self, fail: bool = False):
        self.calls: list = []
        self.fail = fail

    def play(self, samples, sample_rate):
        if self.fail:
            raise OSError("device unplugged")
        self.calls.append(("play", len(samples), sample_rate))

    def stop(self):
        self.calls.append(("stop",))


class FakeClock:
    """Manual monotonic clock."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def complete_period(state: AppState, now: float = 0.0):
    """Start the current period and tick exactly at its deadline."""
    state, _ = update(state, StartStop(now))
    return update(state, Tick(state.timer.end_time))
