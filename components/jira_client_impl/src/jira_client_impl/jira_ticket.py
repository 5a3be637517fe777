"""Turn Jira REST API payloads into ticket contract values."""

from ticket_tracker_interface.ticket import UNASSIGNED, CreatedTicket, TicketStatus


def browse_url(base_url: str, key: str) -> str:
    """Return the human-facing URL of a ticket, e.g. https://myorg.atlassian.net/browse/PROJ-1."""
    return f"{base_url.rstrip('/')}/browse/{key}"


def parse_created_ticket(data: dict, base_url: str) -> CreatedTicket:
    """Build a CreatedTicket from the body of POST /issue.

    Raises:
        KeyError, TypeError: If the body has no ``key``.
    """
    key = data["key"]
    return CreatedTicket(key=key, url=browse_url(base_url, key))


def parse_ticket_status(ticket_key: str, data: dict) -> TicketStatus:
    """Build a TicketStatus from the body of GET /issue/{key}.

    Args:
        ticket_key: The key the caller asked for; echoed back as-is.
        data:       The full issue payload (``fields`` is read from it).

    Raises:
        KeyError, TypeError: If ``fields`` is not an object or ``fields.status.name`` is missing.
    """
    fields = data["fields"]
    if not isinstance(fields, dict):
        raise TypeError(f"'fields' is {type(fields).__name__}, expected an object")
    assignee = fields.get("assignee")
    return TicketStatus(
        key=ticket_key,
        summary=fields.get("summary"),
        #Jira calls "title" a "summary"
        status=fields["status"]["name"],
        #Jira sends "assignee": null for unassigned issues
        assignee=assignee["displayName"] if assignee else UNASSIGNED,
    )
