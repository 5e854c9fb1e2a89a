#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Type definitions and data classes for service-account env setup.
"""

from dataclasses import dataclass, fields
from typing import Dict, Any, Iterator, Tuple


@dataclass(frozen=True)
class ServiceAccountCredentials:
    """The fields of a Google service-account key file that get exported."""
    type: str
    project_id: str
    private_key_id: str
    private_key: str
    client_email: str
    client_id: str
    auth_uri: str
    token_uri: str
    auth_provider_x509_cert_url: str
    client_x509_cert_url: str

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        """Names of the required fields, in declaration order."""
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ServiceAccountCredentials':
        """Create credentials from a parsed JSON object. Extra keys are ignored."""
        return cls(**{name: data[name] for name in cls.field_names()})


@dataclass(frozen=True)
class EnvVar:
    """A single environment variable name and its value."""
    name: str
    value: str


@dataclass(frozen=True)
class CredentialMapping:
    """Ordered, immutable sequence of environment variables built from credentials."""
    entries: Tuple[EnvVar, ...]

    def __iter__(self) -> Iterator[EnvVar]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]

    def to_dict(self) -> Dict[str, str]:
        """Convert mapping to an insertion-ordered dictionary."""
        return {entry.name: entry.value for entry in self.entries}
