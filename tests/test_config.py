from flightcheck.config import Settings


def test_defaults_without_environment():
    settings = Settings.from_env()

    assert settings == Settings(strict_grammar=False, require_definitions=True, encoding="utf-8")


def test_custom_env_values_override_defaults(monkeypatch):
    monkeypatch.setenv("FLIGHTCHECK_STRICT_GRAMMAR", "yes")
    monkeypatch.setenv("FLIGHTCHECK_REQUIRE_DEFINITIONS", "0")
    monkeypatch.setenv("FLIGHTCHECK_ENCODING", "latin-1")

    settings = Settings.from_env()

    assert settings.strict_grammar is True
    assert settings.require_definitions is False
    assert settings.encoding == "latin-1"


def test_blank_and_unknown_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("FLIGHTCHECK_STRICT_GRAMMAR", "   ")
    monkeypatch.setenv("FLIGHTCHECK_REQUIRE_DEFINITIONS", "maybe")
    monkeypatch.setenv("FLIGHTCHECK_ENCODING", "not-a-codec")

    assert Settings.from_env() == Settings()


def test_override_keeps_unset_values():
    settings = Settings(strict_grammar=True).override(strict_grammar=None, require_definitions=False)

    assert settings.strict_grammar is True
    assert settings.require_definitions is False
