"""LTTB downsampling for death-rate time series."""

from .downsampler import downsample, lttb_downsample
from .scale import LinearScale, threshold_for
from .series import DataPoint, DownsampleResult, Series, downsample_many, downsample_series

__all__ = [
    "DataPoint",
    "DownsampleResult",
    "LinearScale",
    "Series",
    "downsample",
    "downsample_many",
    "downsample_series",
    "lttb_downsample",
    "threshold_for",
]
