"""
Runtime configuration for the extraction engine.

Defaults match the values the heuristics were tuned on. Every value can be
overridden with an ``APPAREL_EXTRACTOR_*`` environment variable.
"""
import os
from typing import Optional

from pydantic import BaseModel, Field


ENV_PREFIX = "APPAREL_EXTRACTOR_"


class ExtractionSettings(BaseModel):
    """Tunable constants for line windowing and PDF line reconstruction."""

    lookback: int = Field(
        3, ge=0, description="Lines before the item-number line included in its context block"
    )
    max_window: int = Field(
        25, ge=1, description="Maximum number of lines in a context block"
    )
    supplier_scan_lines: int = Field(
        15, ge=1, description="Lines scanned for suppliers, starting at the item-number line"
    )
    row_tolerance: float = Field(
        0.5, gt=0, description="Vertical rounding step used to group PDF words into one row"
    )
    gap_threshold: float = Field(
        5.0, ge=0, description="Horizontal gap above which a space is inserted between words"
    )
    log_level: str = Field("WARNING", description="Logging level used by the CLI")


def _get_env(key: str) -> Optional[str]:
    value = os.getenv(ENV_PREFIX + key)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _get_int(key: str, default: int) -> int:
    value = _get_env(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"Environment variable {ENV_PREFIX}{key} must be an integer") from exc


def _get_float(key: str, default: float) -> float:
    value = _get_env(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"Environment variable {ENV_PREFIX}{key} must be a number") from exc


def load_settings() -> ExtractionSettings:
    """Build settings from defaults overridden by environment variables."""
    defaults = ExtractionSettings()
    return ExtractionSettings(
        lookback=_get_int("LOOKBACK", defaults.lookback),
        max_window=_get_int("MAX_WINDOW", defaults.max_window),
        supplier_scan_lines=_get_int("SUPPLIER_SCAN_LINES", defaults.supplier_scan_lines),
        row_tolerance=_get_float("ROW_TOLERANCE", defaults.row_tolerance),
        gap_threshold=_get_float("GAP_THRESHOLD", defaults.gap_threshold),
        log_level=(_get_env("LOG_LEVEL") or defaults.log_level).upper(),
    )
