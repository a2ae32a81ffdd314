import pytest

CREDENTIAL_VARS = (
    "GOOGLE_APPLICATION_CREDENTIALS",
    "GOOGLE_CREDENTIALS_JSON",
    "GOOGLE_CREDENTIALS_BASE64",
)


@pytest.fixture(autouse=True)
def clean_credentials_env(monkeypatch):
    """Echte Credentials aus der Umgebung dürfen die Tests nicht beeinflussen."""
    for name in CREDENTIAL_VARS:
        monkeypatch.delenv(name, raising=False)
