#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Exceptions raised while loading service-account credentials.
"""


class CredentialError(Exception):
    """Base class for credential loading failures."""


class ReadError(CredentialError):
    """The credentials file is missing or cannot be read."""


class ParseError(CredentialError):
    """The credentials file is not valid JSON or lacks a required text field."""
