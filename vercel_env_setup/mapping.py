#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Static field to environment-variable table.
"""

from .types import CredentialMapping, EnvVar, ServiceAccountCredentials

# Output order follows this table, not the JSON key order.
FIELD_ENV_TABLE: tuple[tuple[str, str], ...] = (
    ('type', 'GOOGLE_TYPE'),
    ('project_id', 'GOOGLE_PROJECT_ID'),
    ('private_key_id', 'GOOGLE_PRIVATE_KEY_ID'),
    ('private_key', 'GOOGLE_PRIVATE_KEY'),
    ('client_email', 'GOOGLE_CLIENT_EMAIL'),
    ('client_id', 'GOOGLE_CLIENT_ID'),
    ('auth_uri', 'GOOGLE_AUTH_URI'),
    ('token_uri', 'GOOGLE_TOKEN_URI'),
    ('auth_provider_x509_cert_url', 'GOOGLE_AUTH_PROVIDER_X509_CERT_URL'),
    ('client_x509_cert_url', 'GOOGLE_CLIENT_X509_CERT_URL'),
)


def build_mapping(credentials: ServiceAccountCredentials) -> CredentialMapping:
    """
    Pair each credential field with its environment variable name.

    Args:
        credentials: Loaded service-account credentials

    Returns:
        CredentialMapping with one entry per row of FIELD_ENV_TABLE
    """
    return CredentialMapping(tuple(
        EnvVar(name=env_name, value=getattr(credentials, field))
        for field, env_name in FIELD_ENV_TABLE
    ))
