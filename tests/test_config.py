from __future__ import annotations

import pytest

from filterscope.analysis.filters import FilterType
from filterscope.config import FilterScopeConfig, config_from_mapping, load_config, save_config
from filterscope.core.models import FilterSettings


def test_defaults_match_filter_settings() -> None:
    assert FilterScopeConfig().to_settings() == FilterSettings()


def test_analysis_block_is_flattened() -> None:
    cfg = config_from_mapping(
        {
            "analysis": {"filter": "cheby1", "order": "6", "ripple_db": 2},
            "unrelated": {"ignored": True},
        }
    )
    assert cfg.filter_type is FilterType.CHEBYSHEV1
    assert cfg.order == 6
    assert cfg.ripple_db == 2.0


def test_values_are_sanitized() -> None:
    cfg = config_from_mapping({"order": 0, "bode_points": 3, "candle_size": "monthly"})
    assert cfg.order == 1
    assert cfg.bode_points == 16
    assert cfg.candle_size == 30


def test_invalid_sample_rate_rejected() -> None:
    with pytest.raises(ValueError):
        config_from_mapping({"sample_rate": 0})


def test_unknown_filter_rejected() -> None:
    with pytest.raises(ValueError):
        config_from_mapping({"filter_type": "elliptic"})


def test_missing_file_gives_defaults(tmp_path) -> None:
    assert load_config(tmp_path / "nope.yaml") == FilterScopeConfig()
    assert load_config(None) == FilterScopeConfig()


def test_yaml_round_trip(tmp_path) -> None:
    original = config_from_mapping(
        {
            "filter_type": "chebyshev2",
            "cutoff_period": 14,
            "attenuation_db": 60,
            "candle_size": "weekly",
            "db_scale": True,
        }
    )
    path = tmp_path / "cfg" / "analysis.yaml"
    save_config(path, original)

    loaded = load_config(path)
    assert loaded == original
    assert loaded.candle_size == 7
    assert loaded.db_scale is True


def test_non_mapping_yaml_rejected(tmp_path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)
