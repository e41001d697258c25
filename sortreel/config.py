"""Load and save render configurations as JSON.

Format::

    {
      "bar_width": 8,
      "chart_height": 512,
      "margin": 24,
      "margin_top": 32,
      "spacing": 2,
      "background": "#1f1f1f",
      "gradient": ["#0000ff", "#70af00", "#ff0000"]
    }

Every key is optional; missing keys use the values in ``defaults``.
``gradient`` may also be the name of a built-in palette.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from sortreel import defaults
from sortreel.color import Color, Gradient, get_palette
from sortreel.errors import ConfigLoadError
from sortreel.types import RenderConfig

_SIZE_KEYS = ("bar_width", "chart_height", "margin", "margin_top", "spacing")
_POSITIVE_KEYS = ("bar_width", "chart_height")
_KNOWN_KEYS = frozenset(_SIZE_KEYS + ("background", "gradient"))


def config_to_dict(config: RenderConfig) -> dict[str, Any]:
    """Convert RenderConfig to JSON-serializable dict."""
    return {
        'bar_width': config.bar_width,
        'chart_height': config.chart_height,
        'margin': config.margin,
        'margin_top': config.margin_top,
        'spacing': config.spacing,
        'background': config.background.hex,
        'gradient': [stop.hex for stop in config.gradient.stops],
    }


def config_from_dict(data: dict[str, Any], palette: str | None = None) -> RenderConfig:
    """Build a RenderConfig from a parsed JSON object.

    Args:
        data: Parsed config; missing keys fall back to defaults
        palette: Palette name overriding ``data["gradient"]``

    Raises:
        ConfigLoadError: On unknown keys, wrong types or bad colors
    """
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Config must be a JSON object, got {type(data).__name__}")

    unknown = set(data) - _KNOWN_KEYS
    if unknown:
        raise ConfigLoadError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    sizes: dict[str, int] = {}
    for key in _SIZE_KEYS:
        if key not in data:
            continue
        value = data[key]
        # bool is an int subclass
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigLoadError(f"{key} must be an integer, got {value!r}")
        minimum = 1 if key in _POSITIVE_KEYS else 0
        if value < minimum:
            raise ConfigLoadError(f"{key} must be >= {minimum}, got {value}")
        sizes[key] = value

    try:
        background = Color.from_hex(data.get('background', Color(defaults.DEFAULT_BACKGROUND).hex))
        gradient = _parse_gradient(palette if palette is not None else data.get('gradient'))
    except (TypeError, ValueError, AttributeError) as e:
        raise ConfigLoadError(f"Invalid color in config: {e}") from e

    return RenderConfig(background=background, gradient=gradient, **sizes)


def _parse_gradient(value: Any) -> Gradient:
    if value is None:
        return get_palette(defaults.DEFAULT_PALETTE)
    if isinstance(value, str):
        return get_palette(value)
    if isinstance(value, list):
        return Gradient.from_hex(value)
    raise TypeError(f"gradient must be a palette name or list of hex colors, got {value!r}")


def load_config(filepath: str | Path, palette: str | None = None) -> RenderConfig:
    """Load a render configuration file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigLoadError: If the file is not valid JSON or has bad values
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Config file not found: {filepath}")

    try:
        data = json.loads(filepath.read_text())
    except json.JSONDecodeError as e:
        raise ConfigLoadError(f"Corrupt config {filepath}: {e}") from e
    return config_from_dict(data, palette=palette)


def save_config(config: RenderConfig, filepath: str | Path) -> None:
    Path(filepath).write_text(json.dumps(config_to_dict(config), indent=2))
