"""Errors raised while consuming the Nomad event stream."""

from overseer.domain.entities.errors import DomainError


class NomadStreamError(DomainError):
    """Exception raised when the event stream connection fails."""

    pass


class EventSchemaError(DomainError):
    """
    Exception raised when an event payload does not match the expected shape.

    It unwinds the current stream attempt; the client reconnects afterwards.
    """

    pass
