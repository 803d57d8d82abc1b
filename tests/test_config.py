"""Tests for reconciler configuration."""

import pytest

from seedcheck.core.config import DEFAULT_DATA_FOLDERS, ReconcilerConfig, build_config
from seedcheck.core.errors import ConfigurationError


class TestReconcilerConfig:
    """Tests for ReconcilerConfig."""

    def test_defaults(self):
        config = ReconcilerConfig()

        assert config.data_folders == DEFAULT_DATA_FOLDERS
        assert config.file_extension == ".csv"
        assert config.reserved_prefixes == ("sap.common",)
        assert config.verbosity == 1
        assert config.managed_names == {"createdat", "createdby", "modifiedat", "modifiedby"}

    def test_with_verbosity_returns_copy(self):
        config = ReconcilerConfig()

        quiet = config.with_verbosity(0)

        assert quiet.verbosity == 0
        assert config.verbosity == 1

    def test_with_verbosity_rejects_out_of_range(self):
        with pytest.raises(ConfigurationError) as exc:
            ReconcilerConfig().with_verbosity(3)

        assert exc.value.setting == "verbosity"

    def test_build_config_rejects_bad_type(self):
        with pytest.raises(ConfigurationError):
            build_config(verbosity="loud")


class TestFromEnv:
    """Tests for environment based configuration."""

    def test_empty_environment_uses_defaults(self):
        assert ReconcilerConfig.from_env({}) == ReconcilerConfig()

    def test_reads_variables(self):
        config = ReconcilerConfig.from_env({
            "SEEDCHECK_DATA_FOLDERS": "seed, db/data ,",
            "SEEDCHECK_TRACE_LEVEL": "2",
            "SEEDCHECK_RESERVED_PREFIXES": "sap.common,internal",
        })

        assert config.data_folders == ("seed", "db/data")
        assert config.verbosity == 2
        assert config.reserved_prefixes == ("sap.common", "internal")

    def test_empty_reserved_prefixes_disables_exclusion(self):
        config = ReconcilerConfig.from_env({"SEEDCHECK_RESERVED_PREFIXES": ""})

        assert config.reserved_prefixes == ()

    @pytest.mark.parametrize("value", ["loud", "5", "-1"])
    def test_invalid_trace_level(self, value):
        with pytest.raises(ConfigurationError):
            ReconcilerConfig.from_env({"SEEDCHECK_TRACE_LEVEL": value})
