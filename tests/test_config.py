"""Tests for configuration and initialization."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from structlog.testing import capture_logs

from fp_toolkit import ToolkitConfig, get_config, init


class TestToolkitConfig:
    """Tests for the ToolkitConfig dataclass."""

    def test_default_values(self) -> None:
        config = ToolkitConfig()
        assert config.log_level is None
        assert config.json_logs is True
        assert config.parallel_limit is None

    def test_config_is_frozen(self) -> None:
        config = ToolkitConfig()
        with pytest.raises(AttributeError):
            config.parallel_limit = 3  # type: ignore[misc]

    @pytest.mark.parametrize('limit', [0, -1])
    def test_rejects_non_positive_limit(self, limit: int) -> None:
        with pytest.raises(ValueError, match='parallel_limit'):
            ToolkitConfig(parallel_limit=limit)


class TestInit:
    """Tests for init() and get_config()."""

    def test_explicit_arguments(self) -> None:
        config = init(parallel_limit=8, json_logs=False)
        assert config.parallel_limit == 8
        assert config.json_logs is False
        assert get_config() is config

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('FP_TOOLKIT_PARALLEL_LIMIT', '3')
        monkeypatch.setenv('FP_TOOLKIT_JSON_LOGS', 'false')
        config = init()
        assert config.parallel_limit == 3
        assert config.json_logs is False

    def test_arguments_override_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('FP_TOOLKIT_PARALLEL_LIMIT', '3')
        assert init(parallel_limit=5).parallel_limit == 5

    def test_invalid_environment_limit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('FP_TOOLKIT_PARALLEL_LIMIT', 'many')
        with pytest.raises(ValueError, match='FP_TOOLKIT_PARALLEL_LIMIT'):
            init()

    def test_get_config_initializes_lazily(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('FP_TOOLKIT_PARALLEL_LIMIT', '2')
        assert get_config().parallel_limit == 2

    def test_zero_environment_limit_is_rejected_by_init(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('FP_TOOLKIT_PARALLEL_LIMIT', '0')
        with pytest.raises(ValueError, match='positive integer'):
            init()

    def test_get_config_never_configures_logging(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('FP_TOOLKIT_LOG_LEVEL', 'DEBUG')
        with patch('fp_toolkit._config.configure_logging') as configure:
            config = get_config()
        configure.assert_not_called()
        assert config.log_level == 'DEBUG'

    @pytest.mark.parametrize('raw', ['lots', '0', '-2'])
    def test_get_config_ignores_unusable_limit(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv('FP_TOOLKIT_PARALLEL_LIMIT', raw)
        with capture_logs() as logs:
            config = get_config()
        assert config.parallel_limit is None
        assert get_config() is config
        assert {'event': 'invalid_parallel_limit_ignored', 'value': raw, 'log_level': 'warning'} in logs

    def test_log_level_configures_logging(self) -> None:
        with patch('fp_toolkit._config.configure_logging') as configure:
            config = init(log_level='DEBUG', json_logs=False)
        configure.assert_called_once_with('DEBUG', json_output=False)
        assert config.log_level == 'DEBUG'

    def test_log_level_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('FP_TOOLKIT_LOG_LEVEL', 'INFO')
        with patch('fp_toolkit._config.configure_logging') as configure:
            init()
        configure.assert_called_once_with('INFO', json_output=True)

    def test_no_log_level_leaves_logging_alone(self) -> None:
        with patch('fp_toolkit._config.configure_logging') as configure:
            init()
        configure.assert_not_called()
