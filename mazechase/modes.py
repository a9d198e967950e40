"""Shared mode clock for all four adversaries."""

from __future__ import annotations
import logging
from typing import Iterable

from mazechase.config import FPS, FRIGHTENED_SECONDS, SCATTER_SECONDS, STEP_FRAMES
from mazechase.targeting import AdversaryMode

logger = logging.getLogger(__name__)


class ModeController:
    """
    Frame clock driving the global adversary mode.

    Frames count 0..fps-1. Agents move on frames that are a multiple of
    ``step_frames``; each wrap to frame 0 is one simulated second, which
    advances the Scatter timer and the Frightened countdown.

    Mode table:
        countdown > 0          -> FRIGHTENED
        chase switch has fired -> CHASE
        otherwise              -> SCATTER
    """

    def __init__(self, fps: int = FPS, step_frames: int = STEP_FRAMES,
                 scatter_seconds: int = SCATTER_SECONDS,
                 frightened_seconds: int = FRIGHTENED_SECONDS):
        self.fps = fps
        self.step_frames = step_frames
        self.scatter_seconds = scatter_seconds
        self.frightened_seconds = frightened_seconds
        self.frame = 0
        self.seconds = 0
        self.frightened_remaining = 0
        self.chasing = False

    @property
    def mode(self) -> AdversaryMode:
        if self.frightened_remaining > 0:
            return AdversaryMode.FRIGHTENED
        if self.chasing:
            return AdversaryMode.CHASE
        return AdversaryMode.SCATTER

    @property
    def is_step(self) -> bool:
        return self.frame % self.step_frames == 0

    def frighten(self):
        """(Re)start the Frightened countdown; never stacks."""
        if self.frightened_remaining == 0:
            logger.info("Adversaries frightened for %d seconds", self.frightened_seconds)
        self.frightened_remaining = self.frightened_seconds

    def advance(self) -> bool:
        """Move the clock one frame. Returns True on a movement step."""
        self.frame = (self.frame + 1) % self.fps
        if self.frame == 0:
            self._tick_second()
        return self.is_step

    def _tick_second(self):
        if not self.chasing:
            self.seconds += 1
            if self.seconds >= self.scatter_seconds:
                self.chasing = True
                logger.info("Scatter over after %d seconds, chasing", self.seconds)
        if self.frightened_remaining > 0:
            self.frightened_remaining -= 1
            if self.frightened_remaining == 0:
                self.chasing = True
                logger.info("Frightened over, chasing")

    def apply(self, adversaries: Iterable):
        """Push the global mode (and matching icon) onto every adversary."""
        mode = self.mode
        for adversary in adversaries:
            if adversary.mode is not mode:
                adversary.set_mode(mode)
