"""Configuration loading for featuregraph (.featuregraph.yml)."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".featuregraph.yml"

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class LayoutConfig:
    """Canvas size handed to the ring layout."""

    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT


@dataclass
class RenderConfig:
    """SVG export settings."""

    node_radius: float = 30
    legend_categories: int = 5
    title: str = "Feature Dependency Graph"


@dataclass
class ServiceConfig:
    """Bind address for service mode."""

    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class FeatureGraphConfig:
    """Represents the settings defined in .featuregraph.yml."""

    root: Path
    source: Optional[Path] = None
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    service: ServiceConfig = field(default_factory=ServiceConfig)


def load_config(config_path: Path) -> FeatureGraphConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return FeatureGraphConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    source_str = _as_str(data.get("source"))
    source = root / source_str if source_str else None

    layout = LayoutConfig()
    layout_data = _as_dict(data.get("layout"))
    if layout_data:
        layout.width = _as_positive_float(layout_data.get("width")) or DEFAULT_WIDTH
        layout.height = _as_positive_float(layout_data.get("height")) or DEFAULT_HEIGHT

    render = RenderConfig()
    render_data = _as_dict(data.get("render"))
    if render_data:
        render.node_radius = _as_positive_float(render_data.get("node_radius")) or render.node_radius
        legend = _as_int(render_data.get("legend_categories"))
        if legend is not None and legend >= 0:
            render.legend_categories = legend
        render.title = _as_str(render_data.get("title")) or render.title

    service = ServiceConfig()
    service_data = _as_dict(data.get("service"))
    if service_data:
        service.host = _as_str(service_data.get("host")) or service.host
        port = _as_int(service_data.get("port"))
        if port is not None and 0 < port < 65536:
            service.port = port

    return FeatureGraphConfig(
        root=root,
        source=source,
        layout=layout,
        render=render,
        service=service,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.suffix not in {".yml", ".yaml"}:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_positive_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) and number > 0 else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "FeatureGraphConfig",
    "LayoutConfig",
    "RenderConfig",
    "ServiceConfig",
    "load_config",
]
