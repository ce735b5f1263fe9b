import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import tomllib

from .adapters.renderer.strokes import StrokeRenderer
from .adapters.widget_host.memory import InMemoryWidgetHost
from .application.bus import EventBus
from .application.sampler import TimeSampler
from .application.view import ClockView
from .application.widget import TimelineProvider, WidgetEntryView, WidgetRefresher
from .domain.face import Rect
from .infrastructure.calendar import LocalCalendar, resolve_timezone
from .infrastructure.clock import Clock, SystemClock
from .ports.face_renderer import FaceRendererPort
from .ports.widget_host import WidgetHostPort


@dataclass
class SamplerSettings:
    interval: float


@dataclass
class WidgetSettings:
    kind: str
    refresh_interval: float
    label_format: str


@dataclass
class FaceSettings:
    size: float


@dataclass
class ClockSettings:
    timezone: str


@dataclass
class LoggingSettings:
    level: str


@dataclass
class Settings:
    sampler: SamplerSettings
    widget: WidgetSettings
    face: FaceSettings
    clock: ClockSettings
    logging: LoggingSettings


def load_settings(settings_path: Path = Path("config/settings.toml")) -> Settings:
    """Load configuration from environment with optional config file defaults."""

    file_settings = _load_file_settings(settings_path)

    return Settings(
        sampler=SamplerSettings(
            interval=float(_config_value("LEXCLOCK_SAMPLE_INTERVAL", file_settings, "sampler", "interval", "0.2")),
        ),
        widget=WidgetSettings(
            kind=_config_value("LEXCLOCK_WIDGET_KIND", file_settings, "widget", "kind", "LexClockWidget"),
            refresh_interval=float(
                _config_value("LEXCLOCK_REFRESH_INTERVAL", file_settings, "widget", "refresh_interval", "1.0")
            ),
            label_format=_config_value("LEXCLOCK_LABEL_FORMAT", file_settings, "widget", "label_format", "%H:%M:%S"),
        ),
        face=FaceSettings(
            size=float(_config_value("LEXCLOCK_FACE_SIZE", file_settings, "face", "size", "100")),
        ),
        clock=ClockSettings(
            timezone=_config_value("LEXCLOCK_TIMEZONE", file_settings, "clock", "timezone", ""),
        ),
        logging=LoggingSettings(
            level=_config_value("LEXCLOCK_LOG_LEVEL", file_settings, "logging", "level", "INFO"),
        ),
    )


def _load_file_settings(settings_path: Path) -> Dict[str, Any]:
    if not settings_path.exists():
        return {}

    with settings_path.open("rb") as settings_file:
        return tomllib.load(settings_file)


def _config_value(
    env_key: str, settings: Dict[str, Any], section: str, key: str, default: str
) -> str:
    if env_key in os.environ:
        return os.environ[env_key]

    section_data = settings.get(section, {})
    return str(section_data.get(key, default))


def build_components(settings: Optional[Settings] = None, clock: Optional[Clock] = None) -> dict:
    """Construct the widget components for wiring in main.py.

    Raises TimezoneUnavailable when the configured zone cannot be loaded.
    """

    settings = settings or load_settings()
    clock = clock or SystemClock()
    zone = resolve_timezone(settings.clock.timezone)
    bus = EventBus()
    sampler = TimeSampler(clock=clock, bus=bus, calendar=LocalCalendar(zone))
    renderer: FaceRendererPort = StrokeRenderer(Rect(0, 0, settings.face.size, settings.face.size))
    view = ClockView(sampler=sampler, renderer=renderer, interval=settings.sampler.interval)
    provider = TimelineProvider(clock=clock, zone=zone)
    host: WidgetHostPort = InMemoryWidgetHost(provider=provider, label_format=settings.widget.label_format)
    refresher = WidgetRefresher(
        host=host, kind=settings.widget.kind, interval=settings.widget.refresh_interval
    )
    widget = WidgetEntryView(
        clock_view=view, refresher=refresher, provider=provider, label_format=settings.widget.label_format
    )
    return {
        "settings": settings,
        "bus": bus,
        "sampler": sampler,
        "renderer": renderer,
        "view": view,
        "provider": provider,
        "host": host,
        "refresher": refresher,
        "widget": widget,
    }
