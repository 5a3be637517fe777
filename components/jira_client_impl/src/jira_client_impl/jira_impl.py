"""
Authentication
--------------
Requests are authenticated with HTTP Basic auth built from an Atlassian account email and
an API token (https://id.atlassian.com/manage-profile/security/api-tokens). The header value
is computed once when the client is built and reused for every request.

Failures
--------
Nothing in the public API raises for an upstream problem. create_ticket() and
get_ticket_status() return an UpstreamResult; callers check ``result.ok``.

Dependencies:
    uv add requests

"""
#to avoid having to consider forward declarations, the below line must be first line in the file
from __future__ import annotations

import base64
import logging
from typing import Any

import requests

from jira_client_impl.jira_ticket import parse_created_ticket, parse_ticket_status
from ticket_tracker_interface.client import TicketTrackerClient
from ticket_tracker_interface.result import UpstreamErrorKind, UpstreamResult
from ticket_tracker_interface.ticket import CreatedTicket, DescriptionFormat, TicketRequest, TicketStatus

logger = logging.getLogger(__name__)

#every ticket created through the proxy is a plain Task
_ISSUE_TYPE = "Task"

DEFAULT_TIMEOUT = 10.0


class JiraError(Exception):
    """Raised when a value cannot be converted into a shape Jira accepts."""


def basic_auth_header(user_email: str, api_token: str) -> str:
    """Return the ``Authorization`` header value for Jira Cloud basic auth."""
    token = base64.b64encode(f"{user_email}:{api_token}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"

# ---------------------------------------------------------------------------
# Client implementation
# ---------------------------------------------------------------------------

class JiraClient(TicketTrackerClient):
    """
    Args:
        base_url:           Jira instance root URL (e.g. 'https://myorg.atlassian.net')
        user_email:         Email associated with the Jira account
        api_token:          API token generated from Atlassian account settings
        project_key:        Key of the project new tickets are filed under (e.g. 'PROJ')
        description_format: ADF (required by strict Jira Cloud sites) or plain text
        timeout:            Seconds to wait on Jira before giving up on a request
    """

    _API_PREFIX = "/rest/api/3"

    def __init__(
        self,
        base_url: str,
        user_email: str,
        api_token: str,
        project_key: str,
        *,
        description_format: DescriptionFormat = DescriptionFormat.ADF,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._project_key = project_key
        self._description_format = DescriptionFormat(description_format)
        self._timeout = timeout
        self._authorization = basic_auth_header(user_email, api_token)
        self._session = requests.Session()
        self._session.headers.update({
            "Authorization": self._authorization,
            "Accept": "application/json",
            "Content-Type": "application/json",
        })

    @property
    def authorization(self) -> str:
        """The Basic auth header value sent with every request."""
        return self._authorization

    # ------------------------------------------------------------------
    # Internal HTTP helpers
    # ------------------------------------------------------------------

    def _url(self, path: str) -> str:
        return f"{self._base_url}{self._API_PREFIX}{path}"

    def _send(self, method: str, path: str, body: dict | None = None) -> UpstreamResult[Any]:
        """Make one request and return the decoded JSON body, or a failure."""
        try:
            response = self._session.request(method, self._url(path), json=body, timeout=self._timeout)
        except requests.RequestException as e:
            return UpstreamResult.failure(UpstreamErrorKind.TRANSPORT, str(e))

        if not response.ok:
            return UpstreamResult.failure(
                UpstreamErrorKind.HTTP_STATUS,
                self._error_detail(response),
                status_code=response.status_code,
            )
        try:
            return UpstreamResult.success(response.json())
        except ValueError:
            return UpstreamResult.failure(
                UpstreamErrorKind.MALFORMED_RESPONSE,
                f"Jira returned a non-JSON body for {method} {path}",
                status_code=response.status_code,
            )

    @staticmethod
    def _error_detail(response: requests.Response) -> Any:
        #Jira error bodies look like {"errorMessages": [...], "errors": {...}}; pass them through untouched
        try:
            return response.json()
        except ValueError:
            return response.text or f"HTTP {response.status_code}"

    def build_create_payload(self, request: TicketRequest) -> dict:
        """Return the POST /issue body for a ticket request."""
        description = request.description
        #non-strings go through unchanged and Jira reports the error
        if self._description_format is DescriptionFormat.ADF and isinstance(description, str):
            description = text_to_adf(description)
        return {
            "fields": {
                "project": {"key": self._project_key},
                "summary": request.title,
                "description": description,
                "issuetype": {"name": _ISSUE_TYPE},
                "priority": {"name": request.priority},
            }
        }

    # ------------------------------------------------------------------
    # TicketTrackerClient contract
    # ------------------------------------------------------------------

    def create_ticket(self, request: TicketRequest) -> UpstreamResult[CreatedTicket]:
        """Create a Jira Task in the configured project."""
        result = self._send("POST", "/issue", self.build_create_payload(request))
        if not result.ok:
            return result
        try:
            created = parse_created_ticket(result.value, self._base_url)
        except (KeyError, TypeError):
            return UpstreamResult.failure(
                UpstreamErrorKind.MALFORMED_RESPONSE, "Jira response did not include an issue key"
            )
        logger.info("Created Jira issue %s", created.key)
        return UpstreamResult.success(created)

    def get_ticket_status(self, ticket_key: str) -> UpstreamResult[TicketStatus]:
        """Fetch summary, status and assignee of a Jira issue."""
        #ticket_key is not validated or escaped; Jira answers 404 for anything it does not recognise
        result = self._send("GET", f"/issue/{ticket_key}")
        if not result.ok:
            return result
        try:
            return UpstreamResult.success(parse_ticket_status(ticket_key, result.value))
        except (KeyError, TypeError) as e:
            return UpstreamResult.failure(
                UpstreamErrorKind.MALFORMED_RESPONSE, f"Unexpected Jira issue payload: {e}"
            )

    def close(self) -> None:
        self._session.close()


# ---------------------------------------------------------------------------
# ADF builder -  Jira requires description data to be in this format
# ---------------------------------------------------------------------------

def text_to_adf(text: str) -> dict:
    """
    Notes on usage:
        Jira Cloud requires that certain fields, particularly description, are sent to the API in Atlassian Document Format (ADF), otherwise it will be rejected
    """
    if not isinstance(text, str):
        raise JiraError("Input must be a string")
    return {
        "type": "doc",
        "version": 1,
        "content": [
            {
                "type": "paragraph",
                "content": [{"type": "text", "text": text}],
            }
        ],
    }
