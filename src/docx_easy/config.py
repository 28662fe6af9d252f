"""Configuration classes for docx-easy."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .fonts import parse_font_size
from .utils import print_info


@dataclass
class Config:
    """Default fonts, colors and sizes used when composing documents."""

    font_family_ch: str = "宋体"
    font_family_en: str = "Times New Roman"
    font_family_cs: str | None = None
    font_size: float = 12
    color: str = "black"
    line_spacing: float = 1.25
    paper: str = "A4"
    banner_text_color: str = "white"
    banner_bg_color: str = "#006699"
    banner_font_size: float = 22
    banner_width_cm: float = 16
    banner_height_cm: float = 2
    info_font_size: float = 14
    info_border_color: str = "black"

    @classmethod
    def from_file(cls, config_path: str | Path) -> Config:
        """Load configuration from JSON file."""
        config_path = Path(config_path)
        if not config_path.exists():
            print_info(f"Config file not found: {config_path}, using defaults")
            return cls()

        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Create Config from dictionary."""
        config = cls()

        # Font configuration
        font_config = data.get("font", {})
        config.font_family_ch = font_config.get("family_ch", config.font_family_ch)
        config.font_family_en = font_config.get("family_en", config.font_family_en)
        config.font_family_cs = font_config.get("family_cs", config.font_family_cs)
        config.font_size = parse_font_size(font_config.get("size", config.font_size))
        config.color = font_config.get("color", config.color)
        config.line_spacing = font_config.get("line_spacing", config.line_spacing)

        # Page configuration
        page_config = data.get("page", {})
        config.paper = page_config.get("paper", config.paper)

        # Banner configuration
        banner_config = data.get("banner", {})
        config.banner_text_color = banner_config.get("text_color", config.banner_text_color)
        config.banner_bg_color = banner_config.get("bg_color", config.banner_bg_color)
        config.banner_font_size = parse_font_size(banner_config.get("font_size", config.banner_font_size))
        config.banner_width_cm = banner_config.get("width_cm", config.banner_width_cm)
        config.banner_height_cm = banner_config.get("height_cm", config.banner_height_cm)

        # Info table configuration
        info_config = data.get("info_table", {})
        config.info_font_size = parse_font_size(info_config.get("font_size", config.info_font_size))
        config.info_border_color = info_config.get("border_color", config.info_border_color)

        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "font": {
                "family_ch": self.font_family_ch,
                "family_en": self.font_family_en,
                "family_cs": self.font_family_cs,
                "size": self.font_size,
                "color": self.color,
                "line_spacing": self.line_spacing,
            },
            "page": {
                "paper": self.paper,
            },
            "banner": {
                "text_color": self.banner_text_color,
                "bg_color": self.banner_bg_color,
                "font_size": self.banner_font_size,
                "width_cm": self.banner_width_cm,
                "height_cm": self.banner_height_cm,
            },
            "info_table": {
                "font_size": self.info_font_size,
                "border_color": self.info_border_color,
            },
        }

    def save(self, path: str | Path) -> None:
        """Save configuration to JSON file."""
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, ensure_ascii=False, indent=4)


# Default configuration template
DEFAULT_CONFIG = {
    "font": {
        "family_ch": "宋体",
        "family_en": "Times New Roman",
        "size": "小四",
        "color": "black",
        "line_spacing": 1.25,
    },
    "page": {
        "paper": "A4",
    },
    "banner": {
        "text_color": "white",
        "bg_color": "#006699",
        "font_size": "二号",
        "width_cm": 16,
        "height_cm": 2,
    },
    "info_table": {
        "font_size": "四号",
        "border_color": "black",
    },
}
