"""Nomad event stream integration."""

from .backoff import BackoffPolicy, ExponentialBackoff, FixedBackoff
from .channel import bounded_channel
from .decoder import StreamFrameDecoder
from .errors import EventSchemaError, NomadStreamError
from .models import NomadEvent, NomadStreamFrame
from .source import IdleDeploymentEventSource, NomadDeploymentEventSource
from .stream_client import NomadEventStreamClient, StreamState
from .translator import NomadJobEventTranslator, extract_image_version

__all__ = [
    "BackoffPolicy",
    "ExponentialBackoff",
    "FixedBackoff",
    "bounded_channel",
    "StreamFrameDecoder",
    "EventSchemaError",
    "NomadStreamError",
    "NomadEvent",
    "NomadStreamFrame",
    "IdleDeploymentEventSource",
    "NomadDeploymentEventSource",
    "NomadEventStreamClient",
    "StreamState",
    "NomadJobEventTranslator",
    "extract_image_version",
]
