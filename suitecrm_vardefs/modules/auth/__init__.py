"""
Auth Module - Black Box Interface

Purpose: Exchange user credentials for a bearer token
Interface: get_access_token(), TokenResult
Hidden: OAuth2 password grant payload, response parsing
"""

from .password_grant import TokenResult, get_access_token

__all__ = ["TokenResult", "get_access_token"]
