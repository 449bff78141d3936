"""Deployment event source interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import AsyncIterator

from overseer.domain.entities.deployment import DeploymentEvent


class IDeploymentEventSource(ABC):
    """A source of normalized deployment events, in observation order."""

    @abstractmethod
    def stream_events(self) -> AsyncIterator[DeploymentEvent]:
        """
        Return an unbounded async iterator of deployment events.

        The iterator ends when the source stops; closing it (or cancelling
        the task consuming it) releases every resource held by the source.
        """
        raise NotImplementedError
