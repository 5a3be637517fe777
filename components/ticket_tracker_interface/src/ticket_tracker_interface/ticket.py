"""Ticket contract - values exchanged between the proxy and a tracker."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

#returned in place of an assignee name when the tracker reports nobody
UNASSIGNED = "Unassigned"


class DescriptionFormat(str, Enum):
    """How a ticket description is encoded on the way to the tracker."""

    ADF = "adf"
    PLAIN = "plain"


@dataclass(frozen=True)
#fields are Any: request bodies are forwarded without validation
class TicketRequest:
    """
    A ticket to be created. Values are taken verbatim from the inbound request body,
    so any of them may be None or a non-string; the tracker decides what it accepts.
    """

    title: Any = None
    description: Any = None
    priority: Any = None

    @classmethod
    def from_body(cls, body: dict) -> "TicketRequest":
        """Pick the known fields out of a JSON body, ignoring anything else."""
        return cls(
            title=body.get("title"),
            description=body.get("description"),
            priority=body.get("priority"),
        )


@dataclass(frozen=True)
class CreatedTicket:
    """Key assigned by the tracker and the browse URL derived from it."""

    key: str
    url: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class TicketStatus:
    key: str
    summary: str | None
    status: str
    assignee: str = UNASSIGNED

    def to_dict(self) -> dict:
        return asdict(self)
