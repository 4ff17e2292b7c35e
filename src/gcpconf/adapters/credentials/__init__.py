"""Credential loading adapter.

Contents:
    * :func:`.loader.load_credentials` - Parse credential material and report its universe domain
"""

from __future__ import annotations

from .loader import ServiceAccountKeyModel, is_credential_file, load_credentials, parse_credential_json

__all__ = [
    "ServiceAccountKeyModel",
    "is_credential_file",
    "load_credentials",
    "parse_credential_json",
]
