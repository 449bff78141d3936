"""Reconnect delay policies for the event stream client."""

import random
from abc import ABC, abstractmethod


class BackoffPolicy(ABC):
    """Maps the number of consecutive failed attempts to a delay."""

    @abstractmethod
    def delay(self, attempt: int) -> float:
        """Seconds to wait before attempt ``attempt + 1`` (``attempt`` >= 1)."""
        pass


class FixedBackoff(BackoffPolicy):
    """The same delay after every failure."""

    def __init__(self, delay_seconds: float = 5.0):
        if delay_seconds < 0:
            raise ValueError("delay_seconds must be non-negative")
        self.delay_seconds = delay_seconds

    def delay(self, attempt: int) -> float:
        return self.delay_seconds


class ExponentialBackoff(BackoffPolicy):
    """
    Delay growing geometrically with consecutive failures, up to a cap.

    With ``jitter`` the delay is drawn uniformly from ``[0, delay]`` so that
    several consumers do not reconnect in lockstep.
    """

    def __init__(
        self,
        initial_seconds: float = 5.0,
        max_seconds: float = 60.0,
        multiplier: float = 2.0,
        jitter: bool = False,
    ):
        if initial_seconds < 0 or max_seconds < 0:
            raise ValueError("delays must be non-negative")
        if multiplier < 1:
            raise ValueError("multiplier must be at least 1")
        self.initial_seconds = initial_seconds
        self.max_seconds = max_seconds
        self.multiplier = multiplier
        self.jitter = jitter

    def delay(self, attempt: int) -> float:
        exponent = max(attempt, 1) - 1
        try:
            value = min(
                self.initial_seconds * self.multiplier**exponent, self.max_seconds
            )
        except OverflowError:
            value = self.max_seconds
        if self.jitter:
            return random.uniform(0, value)
        return value
