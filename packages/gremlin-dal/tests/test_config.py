"""Tests for settings loading."""

from gremlin_dal.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("GREMLIN_DAL_HOST", raising=False)

    settings = Settings(_env_file=None)

    assert settings.host == "localhost"
    assert settings.port == 8182
    assert settings.use_ssl is True
    assert settings.strict_component_type is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("GREMLIN_DAL_HOST", "db.cluster-abc.neptune.amazonaws.com")
    monkeypatch.setenv("GREMLIN_DAL_USE_SSL", "false")
    monkeypatch.setenv("GREMLIN_DAL_STRICT_COMPONENT_TYPE", "1")

    settings = Settings(_env_file=None)

    assert settings.host == "db.cluster-abc.neptune.amazonaws.com"
    assert settings.use_ssl is False
    assert settings.strict_component_type is True
