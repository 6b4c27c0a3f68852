"""Integrations with third-party graph libraries."""
