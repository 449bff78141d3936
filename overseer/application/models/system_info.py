"""Lightweight settings structures consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SystemInfo:
    """Configuration snapshot exposed by the /info endpoint."""

    title: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    nomad_enabled: bool
    nomad_address: str
    nomad_topic: str
    database_name: str
