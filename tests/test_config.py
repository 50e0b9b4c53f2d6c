"""Tests for configuration loading."""

import logging
import logging.handlers
import os
import tempfile

from fhir_narrative.config import NarrativeConfig, _interpolate_env, load_config, setup_logging
from fhir_narrative.renderers import RenderingContext


class TestConfig:
    def test_default_config(self):
        config = load_config("nonexistent.yaml")
        assert config.rendering.prefix == ""
        assert config.rendering.all_rest_interfaces is False
        assert config.markdown.extensions == ["extra"]
        assert config.renderers == {}

    def test_env_interpolation(self):
        os.environ["TEST_NARRATIVE_VAR"] = "hello"
        try:
            assert _interpolate_env("${TEST_NARRATIVE_VAR}") == "hello"
            assert _interpolate_env("prefix_${TEST_NARRATIVE_VAR}_suffix") == "prefix_hello_suffix"
        finally:
            del os.environ["TEST_NARRATIVE_VAR"]

    def test_missing_env_var_kept(self):
        result = _interpolate_env("${NONEXISTENT_NARRATIVE_VAR_12345}")
        assert result == "${NONEXISTENT_NARRATIVE_VAR_12345}"

    def test_load_yaml_file(self):
        os.environ["TEST_NARRATIVE_BASE"] = "http://hl7.org/fhir/"
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(
                "rendering:\n"
                "  prefix: '${TEST_NARRATIVE_BASE}'\n"
                "  all_rest_interfaces: true\n"
                "markdown:\n"
                "  extensions: [tables]\n"
            )
            f.flush()
            config = load_config(f.name)
        os.unlink(f.name)
        del os.environ["TEST_NARRATIVE_BASE"]
        assert config.rendering.prefix == "http://hl7.org/fhir/"
        assert config.rendering.all_rest_interfaces is True
        assert config.markdown.extensions == ["tables"]

    def test_context_from_config(self):
        config = NarrativeConfig(
            rendering={"prefix": "p/", "all_rest_interfaces": True},
            markdown={"extensions": []},
        )
        context = RenderingContext.from_config(config)
        assert context.prefix == "p/"
        assert context.all_rest_interfaces is True
        assert context.markdown.extensions == []


class TestSetupLogging:
    def test_file_handler_created(self, tmp_path, monkeypatch):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)
        config = NarrativeConfig(logging={"level": "debug", "dir": str(tmp_path / "logs")})
        setup_logging(config)
        try:
            assert (tmp_path / "logs").is_dir()
            assert root.level == logging.DEBUG
            assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers)
        finally:
            for h in root.handlers:
                h.close()
