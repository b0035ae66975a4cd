"""Tests for domain/model/configuration.py."""

import pytest

from verifylog.domain.model.configuration import VerifierConfig


class TestVerifierConfig:
    """Tests for VerifierConfig."""

    def test_defaults(self) -> None:
        config = VerifierConfig()
        assert config.show_invocations is True
        assert config.max_invocations is None
        assert config.width == 120

    def test_max_invocations_zero_raises(self) -> None:
        with pytest.raises(ValueError, match="max_invocations must be >= 1"):
            VerifierConfig(max_invocations=0)

    def test_narrow_width_raises(self) -> None:
        with pytest.raises(ValueError, match="width must be >= 40"):
            VerifierConfig(width=10)
