"""Audio package."""

from .worker import AudioChannelClosedError, AudioCommand, AudioWorker

__all__ = ["AudioChannelClosedError", "AudioCommand", "AudioWorker"]
