"""Configuration loading, saving, and defaults for the dock."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from reorderdock.core.layout import (
    DEFAULT_ICON_SIZE,
    DEFAULT_ITEM_MARGIN,
    slot_extent,
)

DEFAULT_CONFIG_DIR = (
    Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "reorderdock"
)
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "dock.json"

# Symbolic icon names for the demo strip: person, message, call, camera, photo
DEFAULT_ITEMS: list[str] = [
    "avatar-default-symbolic",
    "mail-unread-symbolic",
    "call-start-symbolic",
    "camera-photo-symbolic",
    "image-x-generic-symbolic",
]

LAYOUTS = ("stacked", "row")


@dataclass
class Config:
    """Dock configuration with sensible defaults.

    The current item order is not part of it: every start reseeds the
    dock from `items`.
    """

    # Icon size in pixels
    icon_size: int = DEFAULT_ICON_SIZE
    # Empty space on each side of an icon inside its slot
    item_margin: int = DEFAULT_ITEM_MARGIN
    # "stacked" animates slot changes, "row" snaps them
    layout: str = "stacked"
    # Duration of slot transitions for the stacked layout
    animation_ms: int = 300
    # Initial items shown by the demo application
    items: list[str] = field(default_factory=lambda: list(DEFAULT_ITEMS))

    @property
    def slot_extent(self) -> float:
        """Width of one slot, shared by hit-testing and drawing."""
        return slot_extent(self.icon_size, self.item_margin)

    @property
    def effective_animation_ms(self) -> int:
        return self.animation_ms if self.layout == "stacked" else 0

    def __post_init__(self) -> None:
        self._path: Path = DEFAULT_CONFIG_FILE

    @classmethod
    def load(cls, path: Path | str | None = None) -> Config:
        """Load config from JSON file, falling back to defaults for missing keys."""
        path = Path(path) if path else DEFAULT_CONFIG_FILE
        if not path.exists():
            config = cls()
            config._path = path
            config.save(path)
            return config

        with open(path) as f:
            data: dict[str, Any] = json.load(f)

        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_fields}
        config = cls(**filtered)
        config._path = path
        if config.layout not in LAYOUTS:
            config.layout = "stacked"
        return config

    def save(self, path: Path | str | None = None) -> None:
        """Save config to JSON file."""
        path = Path(path) if path else self._path
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(asdict(self), f, indent=2)
            f.write("\n")
