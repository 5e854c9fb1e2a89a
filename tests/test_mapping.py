import dataclasses

import pytest

from vercel_env_setup.mapping import FIELD_ENV_TABLE, build_mapping
from vercel_env_setup.types import ServiceAccountCredentials


EXPECTED_NAMES = [
    "GOOGLE_TYPE",
    "GOOGLE_PROJECT_ID",
    "GOOGLE_PRIVATE_KEY_ID",
    "GOOGLE_PRIVATE_KEY",
    "GOOGLE_CLIENT_EMAIL",
    "GOOGLE_CLIENT_ID",
    "GOOGLE_AUTH_URI",
    "GOOGLE_TOKEN_URI",
    "GOOGLE_AUTH_PROVIDER_X509_CERT_URL",
    "GOOGLE_CLIENT_X509_CERT_URL",
]


def test_table_covers_every_credential_field():
    assert [field for field, _ in FIELD_ENV_TABLE] == list(ServiceAccountCredentials.field_names())


def test_build_mapping_order_and_values(sample_credentials):
    creds = ServiceAccountCredentials.from_dict(sample_credentials)

    mapping = build_mapping(creds)

    assert len(mapping) == 10
    assert mapping.names() == EXPECTED_NAMES
    for (field, name), entry in zip(FIELD_ENV_TABLE, mapping):
        assert entry.name == name
        assert entry.value == sample_credentials[field]


def test_order_does_not_depend_on_json_key_order(sample_credentials):
    reversed_data = dict(reversed(list(sample_credentials.items())))

    mapping = build_mapping(ServiceAccountCredentials.from_dict(reversed_data))

    assert mapping.names() == EXPECTED_NAMES


def test_to_dict_preserves_order(sample_credentials):
    mapping = build_mapping(ServiceAccountCredentials.from_dict(sample_credentials))

    as_dict = mapping.to_dict()

    assert list(as_dict) == EXPECTED_NAMES
    assert as_dict["GOOGLE_PROJECT_ID"] == "p1"


def test_mapping_is_immutable(sample_credentials):
    mapping = build_mapping(ServiceAccountCredentials.from_dict(sample_credentials))

    with pytest.raises(dataclasses.FrozenInstanceError):
        mapping.entries = ()
    with pytest.raises(dataclasses.FrozenInstanceError):
        mapping.entries[0].value = "changed"
