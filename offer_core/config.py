"""Configuration helpers for the offer scraper."""
from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import Any, Dict, Iterable, List, Mapping, Optional

RENDERERS = ("playwright", "static")

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)
DEFAULT_BROWSER_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--window-size=1280x1024",
]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class ScraperConfig:
    """Canonical configuration shared by the renderer and the web backend."""

    host: str = "0.0.0.0"
    port: int = 3005
    renderer: str = "playwright"
    headless: bool = True
    navigation_timeout_ms: int = 60000
    wait_until: str = "domcontentloaded"
    user_agent: str = DEFAULT_USER_AGENT
    browser_args: List[str] = field(default_factory=lambda: list(DEFAULT_BROWSER_ARGS))
    max_concurrent_renders: int = 2
    log_level: str = "INFO"

    @property
    def navigation_timeout_seconds(self) -> float:
        return self.navigation_timeout_ms / 1000.0

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serialisable version of the configuration."""

        return {
            "host": self.host,
            "port": self.port,
            "renderer": self.renderer,
            "headless": self.headless,
            "navigation_timeout_ms": self.navigation_timeout_ms,
            "wait_until": self.wait_until,
            "user_agent": self.user_agent,
            "browser_args": list(self.browser_args),
            "max_concurrent_renders": self.max_concurrent_renders,
            "log_level": self.log_level,
        }


def _parse_int(value: Any, default: int, minimum: int = 0) -> int:
    if value is None or value == "":
        return default
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return default
    if parsed < minimum:
        return default
    return parsed


def _parse_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return default
    normalised = str(value).strip().lower()
    if normalised in _TRUE_VALUES:
        return True
    if normalised in _FALSE_VALUES:
        return False
    return default


def _ensure_list(value: str | Iterable[str] | None) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        if not value:
            return []
        return [item.strip() for item in value.split(",") if item.strip()]
    return [item for item in value if item]


def _parse_renderer(value: Optional[str]) -> str:
    if not value:
        return "playwright"
    renderer = value.strip().lower()
    if renderer not in RENDERERS:
        raise ValueError(
            f"Unknown renderer '{value}', expected one of: {', '.join(RENDERERS)}"
        )
    return renderer


def create_config_from_mapping(data: Mapping[str, Any]) -> ScraperConfig:
    """Create a configuration from a mapping using :class:`ScraperConfig` field names."""

    defaults = ScraperConfig()
    browser_args = _ensure_list(data.get("browser_args"))
    return ScraperConfig(
        host=str(data.get("host") or defaults.host),
        port=_parse_int(data.get("port"), defaults.port, minimum=1),
        renderer=_parse_renderer(data.get("renderer")),
        headless=_parse_bool(data.get("headless"), defaults.headless),
        navigation_timeout_ms=_parse_int(
            data.get("navigation_timeout_ms"), defaults.navigation_timeout_ms, minimum=1
        ),
        wait_until=str(data.get("wait_until") or defaults.wait_until),
        user_agent=str(data.get("user_agent") or defaults.user_agent),
        browser_args=browser_args or defaults.browser_args,
        max_concurrent_renders=_parse_int(
            data.get("max_concurrent_renders"), defaults.max_concurrent_renders, minimum=1
        ),
        log_level=str(data.get("log_level") or defaults.log_level).upper(),
    )


_ENV_FIELDS = {
    "HOST": "host",
    "PORT": "port",
    "SCRAPER_RENDERER": "renderer",
    "SCRAPER_HEADLESS": "headless",
    "SCRAPER_TIMEOUT_MS": "navigation_timeout_ms",
    "SCRAPER_WAIT_UNTIL": "wait_until",
    "SCRAPER_USER_AGENT": "user_agent",
    "SCRAPER_BROWSER_ARGS": "browser_args",
    "SCRAPER_MAX_CONCURRENT_RENDERS": "max_concurrent_renders",
    "LOG_LEVEL": "log_level",
}


def create_config_from_env(env: Mapping[str, str] | None = None) -> ScraperConfig:
    """Create a configuration from environment variables.

    Unset or malformed values fall back to the defaults of :class:`ScraperConfig`.
    """

    source = os.environ if env is None else env
    data = {name: source[var] for var, name in _ENV_FIELDS.items() if var in source}
    return create_config_from_mapping(data)


def create_config(data: Mapping[str, Any] | None = None) -> ScraperConfig:
    """Unified helper accepting a mapping, or ``None`` to read the environment."""

    if data is None:
        return create_config_from_env()
    if isinstance(data, Mapping):
        return create_config_from_mapping(data)
    raise TypeError("Unsupported configuration payload type: expected a mapping or None")
