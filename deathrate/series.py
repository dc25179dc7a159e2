"""Pydantic models and helpers for downsampling chart series."""

import logging
import time
from operator import attrgetter
from typing import Iterable, List, Optional

from pydantic import BaseModel, Field

from .config import Settings, settings as default_settings
from .downsampler import downsample
from .scale import threshold_for

logger = logging.getLogger(__name__)


class DataPoint(BaseModel):
    """Single time-series data point."""

    t: int  # Timestamp in milliseconds since epoch
    v: float  # Value


class Series(BaseModel):
    """Time-series data for a single country or signal."""

    name: str
    unit: str = ""
    data: List[DataPoint] = Field(default_factory=list)


class DownsampleStats(BaseModel):
    """Downsampling statistics."""

    input_points: int
    output_points: int
    threshold: int
    duration_ms: float


class DownsampleResult(BaseModel):
    """Downsampled series with statistics."""

    series: Series
    stats: DownsampleStats


def resolve_threshold(
    length: int,
    threshold: Optional[int] = None,
    settings: Optional[Settings] = None,
    wide: bool = False,
) -> int:
    """Pick the threshold for a series: explicit, wide, scaled from length, or fixed."""
    if threshold is not None:
        return threshold
    cfg = settings or default_settings
    if wide:
        return cfg.wide_threshold
    if cfg.dynamic_threshold:
        return threshold_for(length, cfg)
    return cfg.default_threshold


def downsample_series(
    series: Series,
    threshold: Optional[int] = None,
    settings: Optional[Settings] = None,
    wide: bool = False,
) -> DownsampleResult:
    """
    Downsample a series, returning a new model.

    Args:
        series: Series to downsample (left untouched)
        threshold: Explicit target size; derived from settings when None
        settings: Threshold configuration, defaults to the global settings
        wide: Use the wide chart threshold when no explicit one is given

    Returns:
        DownsampleResult with the reduced series and statistics
    """
    start = time.perf_counter()
    target = resolve_threshold(len(series.data), threshold, settings, wide)

    data = downsample(series.data, target, attrgetter("t"), attrgetter("v"))

    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "Downsampled series %s: %d -> %d points (threshold=%d)",
        series.name,
        len(series.data),
        len(data),
        target,
    )

    return DownsampleResult(
        series=series.model_copy(update={"data": data}),
        stats=DownsampleStats(
            input_points=len(series.data),
            output_points=len(data),
            threshold=target,
            duration_ms=duration_ms,
        ),
    )


def downsample_many(
    series_list: Iterable[Series],
    threshold: Optional[int] = None,
    settings: Optional[Settings] = None,
    wide: bool = False,
) -> List[DownsampleResult]:
    """Downsample each series in order."""
    return [downsample_series(s, threshold, settings, wide) for s in series_list]
