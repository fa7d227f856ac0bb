"""
Unit tests for ErpConfig validation.
"""

import pytest

from student_erp.config import ErpConfig


class TestErpConfig:
    """Tests for ErpConfig dataclass."""

    def test_defaults(self):
        config = ErpConfig()
        assert config.csv_path is None
        assert (config.field_delimiter, config.list_delimiter, config.pair_delimiter) == (",", ";", ":")
        assert config.has_header
        assert config.default_threshold == 9

    def test_immutable(self):
        config = ErpConfig()
        with pytest.raises(AttributeError):
            config.default_threshold = 5

    def test_multi_character_delimiter_rejected(self):
        with pytest.raises(ValueError, match="single character"):
            ErpConfig(field_delimiter=",,")

    def test_duplicate_delimiters_rejected(self):
        with pytest.raises(ValueError, match="distinct"):
            ErpConfig(list_delimiter=",")

    @pytest.mark.parametrize("threshold", [-1, 11])
    def test_default_threshold_out_of_range(self, threshold):
        with pytest.raises(ValueError, match="default_threshold"):
            ErpConfig(default_threshold=threshold)

    def test_empty_encoding_rejected(self):
        with pytest.raises(ValueError, match="encoding"):
            ErpConfig(encoding="")
