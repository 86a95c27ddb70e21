"""Credential acquisition."""

from .token import TokenProvider, parse_token_response

__all__ = ["TokenProvider", "parse_token_response"]
