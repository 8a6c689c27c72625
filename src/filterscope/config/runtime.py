"""Runtime configuration for analysis runs, loaded from YAML."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from ..analysis.bode import MIN_BODE_POINTS
from ..analysis.candles import CandleLength
from ..analysis.filters import FilterType
from ..core.models import (
    DEFAULT_ATTENUATION_DB,
    DEFAULT_BODE_POINTS,
    DEFAULT_CANDLE_SIZE,
    DEFAULT_CUTOFF_PERIOD,
    DEFAULT_ORDER,
    DEFAULT_RIPPLE_DB,
    DEFAULT_SAMPLE_RATE,
    FilterSettings,
)


@dataclass(slots=True)
class FilterScopeConfig:
    """
    Tuning knobs for the filter and the derived views.

    The defaults describe a 4th-order Butterworth with a 4.2-sample cutoff
    period on a series sampled once per unit time.
    """

    filter_type: Any = FilterType.BUTTERWORTH
    cutoff_period: float = DEFAULT_CUTOFF_PERIOD
    order: int = DEFAULT_ORDER
    ripple_db: float = DEFAULT_RIPPLE_DB
    attenuation_db: float = DEFAULT_ATTENUATION_DB
    sample_rate: float = DEFAULT_SAMPLE_RATE
    bode_points: int = DEFAULT_BODE_POINTS
    candle_size: Any = DEFAULT_CANDLE_SIZE

    # Present Bode magnitudes in dB at the output boundary
    db_scale: bool = False

    def sanitized(self) -> FilterScopeConfig:
        """Return a copy with types coerced and derived limits applied."""
        sample_rate = float(self.sample_rate)
        if sample_rate <= 0.0 or not math.isfinite(sample_rate):
            raise ValueError(f"sample_rate must be a positive number, got {self.sample_rate}")
        return FilterScopeConfig(
            filter_type=FilterType.parse(self.filter_type),
            cutoff_period=float(self.cutoff_period),
            order=max(1, int(self.order)),
            ripple_db=float(self.ripple_db),
            attenuation_db=float(self.attenuation_db),
            sample_rate=sample_rate,
            bode_points=max(MIN_BODE_POINTS, int(self.bode_points)),
            candle_size=max(1, _parse_candle_size(self.candle_size)),
            db_scale=bool(self.db_scale),
        )

    def to_settings(self) -> FilterSettings:
        cfg = self.sanitized()
        return FilterSettings(
            filter_type=cfg.filter_type,
            cutoff_period=cfg.cutoff_period,
            order=cfg.order,
            ripple_db=cfg.ripple_db,
            attenuation_db=cfg.attenuation_db,
            sample_rate=cfg.sample_rate,
            bode_points=cfg.bode_points,
            candle_size=cfg.candle_size,
        )


def _parse_candle_size(value: Any) -> int:
    """Accept an integer or a preset name such as ``weekly``."""
    if isinstance(value, CandleLength):
        return value.value
    if isinstance(value, str):
        key = value.strip().upper()
        if key in CandleLength.__members__:
            return CandleLength[key].value
    return int(value)


def _recognized_fields() -> set[str]:
    """Return the dataclass field names accepted by :class:`FilterScopeConfig`."""
    return {f.name for f in fields(FilterScopeConfig)}


def _normalize_mapping(data: Mapping[str, Any]) -> MutableMapping[str, Any]:
    """Flatten a top-level ``analysis`` block and accept ``filter`` for ``filter_type``."""
    merged: MutableMapping[str, Any] = {}
    for key, value in data.items():
        if key == "analysis" and isinstance(value, Mapping):
            merged.update(value)
        else:
            merged[key] = value
    if "filter" in merged and "filter_type" not in merged:
        merged["filter_type"] = merged.pop("filter")
    return merged


def config_from_mapping(data: Mapping[str, Any] | None) -> FilterScopeConfig:
    """Build :class:`FilterScopeConfig` from ``data`` (ignoring unknown keys)."""
    if not data:
        return FilterScopeConfig()
    normalized = _normalize_mapping(data)
    known = _recognized_fields()
    payload = {key: normalized[key] for key in normalized.keys() & known}
    return FilterScopeConfig(**payload).sanitized()


def load_config(path: str | Path | None) -> FilterScopeConfig:
    """
    Load configuration from ``path``.

    Missing files fall back to default :class:`FilterScopeConfig`.
    """
    if path is None:
        return FilterScopeConfig()
    cfg_path = Path(path)
    if not cfg_path.exists():
        return FilterScopeConfig()
    with cfg_path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    if not isinstance(raw, Mapping):
        raise ValueError(f"Expected mapping in {cfg_path}, got {type(raw).__name__}")
    return config_from_mapping(raw)


def save_config(path: str | Path, config: FilterScopeConfig) -> None:
    """Write ``config`` as YAML under an ``analysis`` block."""
    cfg = config.sanitized()
    data = {
        "analysis": {
            "filter_type": cfg.filter_type.value,
            "cutoff_period": cfg.cutoff_period,
            "order": cfg.order,
            "ripple_db": cfg.ripple_db,
            "attenuation_db": cfg.attenuation_db,
            "sample_rate": cfg.sample_rate,
            "bode_points": cfg.bode_points,
            "candle_size": cfg.candle_size,
            "db_scale": cfg.db_scale,
        }
    }
    cfg_path = Path(path)
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    with cfg_path.open("w", encoding="utf-8") as fh:
        yaml.safe_dump(data, fh, default_flow_style=False, sort_keys=False)


__all__ = ["FilterScopeConfig", "config_from_mapping", "load_config", "save_config"]
