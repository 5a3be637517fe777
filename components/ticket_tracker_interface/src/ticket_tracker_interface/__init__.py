"""Contract shared by the proxy service and issue tracker backends."""

from ticket_tracker_interface.client import TicketTrackerClient
from ticket_tracker_interface.result import UpstreamErrorKind, UpstreamResult
from ticket_tracker_interface.ticket import (
    UNASSIGNED,
    CreatedTicket,
    DescriptionFormat,
    TicketRequest,
    TicketStatus,
)

__all__ = [
    "UNASSIGNED",
    "CreatedTicket",
    "DescriptionFormat",
    "TicketRequest",
    "TicketStatus",
    "TicketTrackerClient",
    "UpstreamErrorKind",
    "UpstreamResult",
]
