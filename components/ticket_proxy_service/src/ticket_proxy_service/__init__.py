"""HTTP proxy exposing ticket creation and status lookup for a Jira project."""

from ticket_proxy_service.app import create_app, run
from ticket_proxy_service.config import ProxySettings

__all__ = ["ProxySettings", "create_app", "run"]
