"""Core client contract definitions."""

from abc import ABC, abstractmethod

from ticket_tracker_interface.result import UpstreamResult
from ticket_tracker_interface.ticket import CreatedTicket, TicketRequest, TicketStatus

__all__ = ["TicketTrackerClient"]


class TicketTrackerClient(ABC):
    """Creates tickets and reports their status, one upstream call per operation."""

    @abstractmethod
    def create_ticket(self, request: TicketRequest) -> UpstreamResult[CreatedTicket]:
        """Create a ticket."""
        """Args:
            request: Title, description and priority, forwarded as given

        Notes on usage: Implementations must not raise for upstream failures; network errors
        and error responses are returned as a failed UpstreamResult. No retries.

        Returns:
            UpstreamResult wrapping the CreatedTicket on success

        """
        raise NotImplementedError

    @abstractmethod
    def get_ticket_status(self, ticket_key: str) -> UpstreamResult[TicketStatus]:
        """Get the status of a ticket."""
        """Args:
            ticket_key: The tracker's key for the ticket (e.g. 'PROJ-123')

        Returns:
            UpstreamResult wrapping the TicketStatus on success. A missing ticket is an
            ordinary upstream failure, not a separate error.

        """
        raise NotImplementedError

    def close(self) -> None:
        """Release any pooled connections. Default is a no-op."""
