"""
Realtime sink - renders events as they happen.

Each event blocks for its nominal duration, which is how the notation's
timing is realized. The device and the clock are both injectable.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

logger = logging.getLogger(__name__)

ToneDevice = Callable[[int, int], None]


class RealtimeSink:
    """
    Plays tones through a device callback and sleeps out each event.

    If the device blocks for the tone itself (like a PC speaker beep), set
    device_blocks=True so the tone is not waited out twice.
    """

    def __init__(
        self,
        device: ToneDevice | None = None,
        sleep: Callable[[float], None] = time.sleep,
        device_blocks: bool = False,
    ):
        """
        Initialize the sink.

        Args:
            device: Callable taking (frequency_hz, duration_ms); None for silent playback
            sleep: Sleep function taking seconds (time.sleep by default)
            device_blocks: Whether the device call already lasts the tone's duration
        """
        self.device = device
        self.sleep = sleep
        self.device_blocks = device_blocks

    def sound(self, frequency_hz: int, duration_ms: int) -> None:
        if self.device is not None:
            self.device(frequency_hz, duration_ms)
            if self.device_blocks:
                return
        else:
            logger.debug(f"No device, holding {frequency_hz} Hz silently")
        self.sleep(duration_ms / 1000.0)

    def wait(self, duration_ms: int) -> None:
        self.sleep(duration_ms / 1000.0)
