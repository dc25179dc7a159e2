"""Linear scale mapping series length to an output threshold."""

import math
from typing import Optional, Tuple

from .config import Settings, settings as default_settings


class LinearScale:
    """Continuous linear mapping from a domain interval to a range interval."""

    def __init__(
        self,
        domain: Tuple[float, float],
        output_range: Tuple[float, float],
        clamp: bool = True,
    ):
        self.domain = domain
        self.output_range = output_range
        self.clamp = clamp

    def convert(self, value: float) -> float:
        """Map ``value`` from the domain onto the range."""
        d0, d1 = self.domain
        r0, r1 = self.output_range

        if d0 == d1:
            return (r0 + r1) / 2

        t = (value - d0) / (d1 - d0)
        if self.clamp:
            t = min(max(t, 0.0), 1.0)
        return r0 + t * (r1 - r0)

    def __repr__(self) -> str:
        return (
            f"LinearScale(domain={self.domain}, output_range={self.output_range}, "
            f"clamp={self.clamp})"
        )


def threshold_for(length: int, settings: Optional[Settings] = None) -> int:
    """
    Output threshold for a series of ``length`` points.

    Args:
        length: Number of points in the raw series
        settings: Scale bounds, defaults to the global settings

    Returns:
        Threshold rounded half-up to the nearest integer
    """
    cfg = settings or default_settings
    scale = LinearScale(
        (cfg.scale_domain_min, cfg.scale_domain_max),
        (cfg.scale_range_min, cfg.scale_range_max),
    )
    return math.floor(scale.convert(length) + 0.5)
