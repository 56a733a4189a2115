# ==============================================================================
# Render Theme - Threshold Bands
# ==============================================================================
"""
Visual encodings for the DOT renderer.

Colors and line widths are looked up from ordered threshold bands, which are
plain data and can be overridden through RenderSettings.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field


class Band(BaseModel):
    """A half-open value range [lower, upper) with its visual encoding."""

    model_config = ConfigDict(frozen=True)

    lower: float = Field(..., description="Inclusive lower bound")
    upper: Optional[float] = Field(None, description="Exclusive upper bound (None = unbounded)")
    color: str = Field(..., description="Graphviz color name")
    penwidth: float = Field(..., description="Graphviz line width")

    def contains(self, value: float) -> bool:
        return value >= self.lower and (self.upper is None or value < self.upper)


DEFAULT_NODE_BANDS = [
    Band(lower=0.0, upper=0.1, color="grey", penwidth=1.0),
    Band(lower=0.1, upper=0.2, color="black", penwidth=2.0),
    Band(lower=0.2, upper=0.3, color="orange", penwidth=3.0),
    Band(lower=0.3, upper=0.4, color="red", penwidth=4.0),
    Band(lower=0.4, upper=None, color="red", penwidth=6.0),
]

DEFAULT_EDGE_BANDS = [
    Band(lower=0.0, upper=0.01, color="grey", penwidth=1.0),
    Band(lower=0.01, upper=0.02, color="black", penwidth=2.0),
    Band(lower=0.02, upper=0.03, color="orange", penwidth=3.0),
    Band(lower=0.03, upper=0.04, color="red", penwidth=4.0),
    Band(lower=0.04, upper=None, color="red", penwidth=6.0),
]

DEFAULT_URL_TEMPLATE = "https://ca-test.adyen.com/ca/ca/{name}"
DEFAULT_TITLE_TEMPLATE = "Top {count} screens represent {percent:.0f} % of CA clicks"


class BandScale:
    """Maps a value to the first band containing it."""

    def __init__(self, bands: Sequence[Band]):
        if not bands:
            raise ValueError("a band scale needs at least one band")
        self.bands = tuple(bands)

    def lookup(self, value: float) -> Band:
        """Return the band containing value, or the last band if none does."""
        for band in self.bands:
            if band.contains(value):
                return band
        return self.bands[-1]

    def color(self, value: float) -> str:
        return self.lookup(value).color

    def penwidth(self, value: float) -> float:
        return self.lookup(value).penwidth


@dataclass(frozen=True)
class Theme:
    """Everything the DOT renderer needs besides the graph itself."""

    node_scale: BandScale
    edge_scale: BandScale
    url_template: str = DEFAULT_URL_TEMPLATE
    title_template: str = DEFAULT_TITLE_TEMPLATE
    title_fontsize: int = 40

    @classmethod
    def default(cls) -> "Theme":
        return cls(node_scale=BandScale(DEFAULT_NODE_BANDS), edge_scale=BandScale(DEFAULT_EDGE_BANDS))

    @classmethod
    def from_settings(cls, render_settings) -> "Theme":
        """Build a theme from a RenderSettings instance."""
        return cls(
            node_scale=BandScale(render_settings.node_bands),
            edge_scale=BandScale(render_settings.edge_bands),
            url_template=render_settings.url_template,
            title_template=render_settings.title_template,
            title_fontsize=render_settings.title_fontsize,
        )

    def url_for(self, screen_name: str) -> str:
        return self.url_template.format(name=screen_name)

    def title(self, count: int, fraction: float) -> str:
        return self.title_template.format(count=count, percent=fraction * 100)
