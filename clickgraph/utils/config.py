# ==============================================================================
# Application Configuration
# ==============================================================================
"""
Configuration management using pydantic-settings.

All configuration is loaded from environment variables, with support for
.env files via python-dotenv. CLI options override these values per run.
"""

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from clickgraph.render.theme import (
    DEFAULT_EDGE_BANDS,
    DEFAULT_NODE_BANDS,
    DEFAULT_TITLE_TEMPLATE,
    DEFAULT_URL_TEMPLATE,
    Band,
)

# Load .env file before any settings are instantiated
load_dotenv()


class InputSettings(BaseSettings):
    """Clickstream log file settings."""

    model_config = SettingsConfigDict(env_prefix="INPUT_")

    data_file: Path = Field(default=Path("logs.csv"), description="Path to the log CSV file")
    separator: str = Field(default=";", description="Field separator")
    comment_prefix: str = Field(default="#", description="Prefix marking comment lines")
    screen_prefix: str = Field(
        default="/ca/ca", description="Literal prefix stripped from screen paths"
    )


class GraphSettings(BaseSettings):
    """Graph reduction settings."""

    model_config = SettingsConfigDict(env_prefix="GRAPH_")

    limit: int = Field(
        default=10, ge=0, description="Number of screens to keep (start/end not included)"
    )


class RenderSettings(BaseSettings):
    """DOT rendering settings.

    Bands can be overridden with JSON, e.g.
    RENDER_NODE_BANDS='[{"lower": 0, "upper": null, "color": "blue", "penwidth": 1}]'
    """

    model_config = SettingsConfigDict(env_prefix="RENDER_")

    url_template: str = Field(
        default=DEFAULT_URL_TEMPLATE, description="Node link template ({name} is the screen)"
    )
    title_template: str = Field(
        default=DEFAULT_TITLE_TEMPLATE,
        description="Graph title template ({count} screens, {percent} of clicks)",
    )
    title_fontsize: int = Field(default=40, description="Graph title font size")
    node_bands: list[Band] = Field(
        default_factory=lambda: list(DEFAULT_NODE_BANDS),
        description="Node color/penwidth bands by share of total clicks",
    )
    edge_bands: list[Band] = Field(
        default_factory=lambda: list(DEFAULT_EDGE_BANDS),
        description="Edge color/penwidth bands by edge rank",
    )


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        extra="ignore",
    )

    # Nested settings
    input: InputSettings = Field(default_factory=InputSettings)
    graph: GraphSettings = Field(default_factory=GraphSettings)
    render: RenderSettings = Field(default_factory=RenderSettings)

    # General settings
    log_level: str = Field(default="WARNING", description="Logging level")


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Settings are loaded once and cached for subsequent calls.
    """
    return Settings()
