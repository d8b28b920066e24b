"""Configuration loading tests."""

from __future__ import annotations

import logging
import os
import tempfile
import unittest
from unittest.mock import patch

from nrotel.config import (
    NrOtelConfig,
    configure_logging,
    load_config,
    load_config_from_env,
    load_toml_config,
    merge_configs,
    validate_config,
)
from nrotel.errors import ConfigError

_ENV_KEYS = ("NROTEL_SERVICE_NAME", "NEW_RELIC_SERVICE_NAME", "OTEL_SERVICE_NAME", "NROTEL_DEBUG")


def _clean_env(**values):
    env = {k: v for k, v in os.environ.items() if k not in _ENV_KEYS}
    env.update(values)
    return patch.dict(os.environ, env, clear=True)


class TestConfigModel(unittest.TestCase):
    def test_defaults(self):
        config = NrOtelConfig()
        assert config.transform.service_name is None
        assert config.logging.debug is False
        assert config.service() == ""

    def test_blank_service_name_is_unset(self):
        config = NrOtelConfig(transform={"service_name": "   "})
        assert config.transform.service_name is None
        assert config.service() == ""

    def test_service(self):
        config = NrOtelConfig(transform={"service_name": " checkout-api "})
        assert config.service() == "checkout-api"


class TestConfigLoading(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.find_patch = patch("nrotel.config.find_config_file", return_value=None)
        self.find_patch.start()

    def tearDown(self):
        self.find_patch.stop()
        self.tmpdir.cleanup()

    def _write(self, content: str) -> str:
        path = os.path.join(self.tmpdir.name, "nrotel.toml")
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def test_missing_file_is_empty(self):
        assert load_toml_config(os.path.join(self.tmpdir.name, "absent.toml")) == {}

    def test_invalid_toml_raises(self):
        path = self._write("[transform\nservice_name = ")
        with self.assertRaises(ConfigError):
            load_toml_config(path)

    def test_file_values(self):
        path = self._write('[transform]\nservice_name = "from-file"\n\n[logging]\ndebug = true\n')
        with _clean_env():
            config = load_config(config_file=path)
        assert config.service() == "from-file"
        assert config.logging.debug is True

    def test_env_overrides_file(self):
        path = self._write('[transform]\nservice_name = "from-file"\n')
        with _clean_env(NEW_RELIC_SERVICE_NAME="from-env", NROTEL_DEBUG="yes"):
            config = load_config(config_file=path)
        assert config.service() == "from-env"
        assert config.logging.debug is True

    def test_env_var_preference(self):
        with _clean_env(OTEL_SERVICE_NAME="otel", NROTEL_SERVICE_NAME="nrotel"):
            assert load_config_from_env() == {"transform": {"service_name": "nrotel"}}

    def test_overrides_win(self):
        with _clean_env(NROTEL_SERVICE_NAME="from-env"):
            config = load_config(overrides={"transform": {"service_name": "explicit"}})
        assert config.service() == "explicit"

    def test_invalid_value_raises_config_error(self):
        with _clean_env():
            with self.assertRaises(ConfigError):
                load_config(overrides={"logging": {"debug": "not-a-bool"}})

    def test_validate_config(self):
        with _clean_env():
            ok, message, config = validate_config()
            assert ok is True
            assert isinstance(config, NrOtelConfig)

            ok, message, config = validate_config(overrides={"logging": {"debug": "nope"}})
            assert ok is False
            assert message.startswith("Configuration error")
            assert config is None

    def test_merge_configs_is_deep(self):
        merged = merge_configs(
            {"transform": {"service_name": "a"}, "logging": {"debug": False}},
            {"logging": {"debug": True}},
        )
        assert merged == {"transform": {"service_name": "a"}, "logging": {"debug": True}}


class TestConfigureLogging(unittest.TestCase):
    def tearDown(self):
        logging.getLogger("nrotel").setLevel(logging.NOTSET)

    def test_debug_sets_package_level(self):
        logger = configure_logging(NrOtelConfig(logging={"debug": True}))
        assert logger.name == "nrotel"
        assert logger.level == logging.DEBUG

    def test_without_debug_keeps_host_level(self):
        """A host application's level on the package logger is left alone."""
        logger = logging.getLogger("nrotel")
        logger.setLevel(logging.WARNING)
        configure_logging(NrOtelConfig())
        assert logger.level == logging.WARNING


if __name__ == "__main__":
    unittest.main()
