"""Unit tests for experiment configuration."""

import pytest
from percolation_fire.config import (
    DEFAULT_RESOLUTION,
    DEFAULT_SAMPLE_SIZE,
    ExperimentConfig,
    InvalidParameterError,
)


class TestExperimentConfig:
    """Test cases for ExperimentConfig class."""

    def test_defaults(self):
        config = ExperimentConfig(side=32)
        assert config.resolution == DEFAULT_RESOLUTION == 100
        assert config.sample_size == DEFAULT_SAMPLE_SIZE == 10_000
        assert config.workers is None
        assert config.seed is None

    def test_valid_config(self):
        ExperimentConfig(side=1, resolution=3, sample_size=1).validate()

    def test_zero_side(self):
        with pytest.raises(InvalidParameterError, match="non-zero lattice"):
            ExperimentConfig(side=0).validate()

    @pytest.mark.parametrize("resolution", [0, 1, 2])
    def test_low_resolution(self, resolution):
        with pytest.raises(InvalidParameterError, match="higher than 2"):
            ExperimentConfig(side=4, resolution=resolution).validate()

    def test_zero_sample(self):
        with pytest.raises(InvalidParameterError):
            ExperimentConfig(side=4, sample_size=0).validate()

    @pytest.mark.parametrize("field", [{"workers": 0}, {"chunk_size": 0}, {"side": -1}])
    def test_other_invalid_fields(self, field):
        with pytest.raises(InvalidParameterError):
            ExperimentConfig(**{"side": 4, **field}).validate()

    def test_invalid_parameter_is_value_error(self):
        assert issubclass(InvalidParameterError, ValueError)

    def test_effective_workers(self):
        assert ExperimentConfig(side=4, workers=3).effective_workers == 3
        assert ExperimentConfig(side=4).effective_workers >= 1
