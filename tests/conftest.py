import json

import pytest


SAMPLE_CREDENTIALS = {
    "type": "service_account",
    "project_id": "p1",
    "private_key_id": "k1",
    "private_key": "-----BEGIN...12345678901234567890123456789012345678901234567890END-----",
    "client_email": "a@b.com",
    "client_id": "1",
    "auth_uri": "https://accounts.google.com/o/oauth2/auth",
    "token_uri": "https://oauth2.googleapis.com/token",
    "auth_provider_x509_cert_url": "https://www.googleapis.com/oauth2/v1/certs",
    "client_x509_cert_url": "https://www.googleapis.com/robot/v1/metadata/x509/a%40b.com",
}


@pytest.fixture
def sample_credentials():
    return dict(SAMPLE_CREDENTIALS)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from an empty directory with a credentials/ folder and an empty config."""
    (tmp_path / "credentials").mkdir()
    (tmp_path / "config.yml").write_text("", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_credentials(workdir):
    def _write(data, filename="service-account.json"):
        path = workdir / "credentials" / filename
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write
