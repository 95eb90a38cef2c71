"""Settings: defaults and environment coercion."""

from workledger.config import Settings


def test_defaults_without_environment(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("DATABASE_AUTO_CREATE", raising=False)
    settings = Settings(_env_file=None)
    assert settings.database_url.startswith("sqlite+aiosqlite://")
    assert settings.identity_header == "X-Ledger-Identity"
    assert settings.verifier_identities == []
    assert settings.database_auto_create is True


def test_postgres_url_rewritten_for_asyncpg(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/ledger")
    settings = Settings(_env_file=None)
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/ledger"


def test_verifier_identities_from_comma_separated_env(monkeypatch):
    monkeypatch.setenv("VERIFIER_IDENTITIES", "acme-hr, verifier-v,,")
    settings = Settings(_env_file=None)
    assert settings.verifier_identities == ["acme-hr", "verifier-v"]


def test_verifier_identities_from_json_env(monkeypatch):
    monkeypatch.setenv("VERIFIER_IDENTITIES", '["acme-hr", "verifier-v"]')
    settings = Settings(_env_file=None)
    assert settings.verifier_identities == ["acme-hr", "verifier-v"]
