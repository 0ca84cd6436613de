"""
Tests for httpexpect.config.

Tests settings validation, parsing and env interpolation.
"""

from httpexpect.config import (
    AuthType,
    PrinterType,
    ReporterType,
    SettingsParser,
    load_settings,
    validate_settings_yaml,
)

VALID = """
version: 1
name: my-api
server:
  url: "http://localhost:8080"
  auth: {type: bearer, token: "{{env.API_TOKEN}}"}
defaults:
  timeout_ms: 5000
  headers: {Accept: application/json}
reporter: require
printers: [compact, curl]
env: {API_TOKEN: dev-token}
"""


class TestValidateSettings:
    """Tests for validate_settings_yaml()."""

    def test_valid(self):
        settings, result = validate_settings_yaml(VALID)
        assert result.is_valid, str(result)
        assert settings.name == "my-api"
        assert settings.server.url == "http://localhost:8080"
        assert settings.server.auth.type is AuthType.BEARER
        assert settings.server.auth.token == "dev-token"
        assert settings.defaults.timeout_ms == 5000
        assert settings.defaults.headers == {"Accept": "application/json"}
        assert settings.reporter is ReporterType.REQUIRE
        assert settings.printers == [PrinterType.COMPACT, PrinterType.CURL]

    def test_minimal_defaults(self):
        settings, result = validate_settings_yaml(
            "version: 1\nname: x\nserver: {url: 'https://api.example.com'}\n"
        )
        assert result.is_valid
        assert settings.reporter is ReporterType.ASSERT
        assert settings.printers == []
        assert settings.defaults.timeout_ms == 30000

    def test_missing_required(self):
        settings, result = validate_settings_yaml("name: x\n")
        assert settings is None
        paths = [e.path for e in result.errors]
        assert "version" in paths
        assert "server" in paths

    def test_unknown_top_level(self):
        _, result = validate_settings_yaml(
            "version: 1\nname: x\nserver: {url: 'http://a'}\nsteps: []\n"
        )
        assert not result.is_valid
        assert result.errors[0].path == "steps"

    def test_bad_values(self):
        _, result = validate_settings_yaml("""
version: 1
name: x
server:
  url: ftp://example.com
  auth: {type: basic, username: u}
defaults: {timeout_ms: -1}
reporter: loud
printers: [fancy]
""")
        paths = {e.path for e in result.errors}
        assert paths == {
            "server.url",
            "server.auth.password",
            "defaults.timeout_ms",
            "reporter",
            "printers[0]",
        }
        assert "❌" in str(result)

    def test_invalid_yaml(self):
        settings, result = validate_settings_yaml("version: [1\n")
        assert settings is None
        assert "Invalid YAML" in result.errors[0].message

    def test_not_a_mapping(self):
        _, result = validate_settings_yaml("- 1\n- 2\n")
        assert not result.is_valid


class TestSettingsParser:
    """Tests for {{env.NAME}} interpolation."""

    def test_env_section_wins(self):
        parser = SettingsParser({"env": {"A": "from-file"}}, environ={"A": "from-os", "B": "os-only"})
        assert parser.interpolate("{{env.A}}/{{env.B}}") == "from-file/os-only"

    def test_unknown_left_as_is(self):
        parser = SettingsParser({}, environ={})
        assert parser.interpolate(["{{env.MISSING}}", 1]) == ["{{env.MISSING}}", 1]


class TestLoadSettings:
    def test_load_from_file(self, tmp_path):
        path = tmp_path / "httpexpect.yaml"
        path.write_text(VALID)
        settings, result = load_settings(path)
        assert result.is_valid
        assert settings.name == "my-api"

    def test_missing_file(self, tmp_path):
        settings, result = load_settings(tmp_path / "nope.yaml")
        assert settings is None
        assert result.errors[0].message == "File not found"
