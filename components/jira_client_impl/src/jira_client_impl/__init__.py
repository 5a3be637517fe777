"""Jira Cloud implementation of the ticket tracker contract."""

from jira_client_impl.jira_impl import JiraClient, JiraError, text_to_adf

__all__ = ["JiraClient", "JiraError", "text_to_adf"]
