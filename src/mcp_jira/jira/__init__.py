"""Jira payload builders, response simplifiers and argument validation."""
