"""YAML-backed configuration for the markdown converter."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from listmark.exceptions import ConfigError
from listmark.tree.schema import ListStyle


def _all_styles() -> list[ListStyle]:
    return list(ListStyle)


@dataclass
class ParserConfig:
    """Which block syntaxes the parser recognises."""

    list_styles: list[ListStyle] = field(default_factory=_all_styles)
    headings: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.list_styles, (list, tuple)):
            raise ConfigError(
                f"parser.list_styles must be a list, got {type(self.list_styles).__name__}"
            )
        styles = []
        for style in self.list_styles:
            try:
                styles.append(ListStyle(style))
            except (TypeError, ValueError):
                valid = ", ".join(s.value for s in ListStyle)
                raise ConfigError(
                    f"Unknown list style: '{style}'. Available: {valid}"
                )
        self.list_styles = styles


@dataclass
class SerializerConfig:
    """Markdown output layout."""

    block_separator: str = "\n\n"


@dataclass
class Config:
    """Top-level converter configuration."""

    parser: ParserConfig = field(default_factory=ParserConfig)
    serializer: SerializerConfig = field(default_factory=SerializerConfig)
    verbose: bool = False

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        """Load configuration from a YAML file."""
        try:
            text = path.read_text(encoding="utf-8")
            data = yaml.safe_load(text) or {}
        except FileNotFoundError:
            raise ConfigError(f"Config file not found: {path}")
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}")

        return cls._from_dict(data)

    @classmethod
    def from_yaml_string(cls, text: str) -> Config:
        """Load configuration from a YAML string."""
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML: {exc}")
        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict) -> Config:
        if not isinstance(data, dict):
            raise ConfigError("Config root must be a mapping")

        parser_data = data.get("parser") or {}
        serializer_data = data.get("serializer") or {}
        for name, section in (("parser", parser_data), ("serializer", serializer_data)):
            if not isinstance(section, dict):
                raise ConfigError(f"Config section '{name}' must be a mapping")

        return cls(
            parser=ParserConfig(**{k: v for k, v in parser_data.items() if k in ParserConfig.__dataclass_fields__}),
            serializer=SerializerConfig(**{k: v for k, v in serializer_data.items() if k in SerializerConfig.__dataclass_fields__}),
            verbose=data.get("verbose", False),
        )

    @classmethod
    def default(cls) -> Config:
        """Return the default configuration."""
        return cls()

    @classmethod
    def load(cls, path: Optional[Path] = None) -> Config:
        """Load config from path, or return defaults if path is None."""
        if path is None:
            return cls.default()
        return cls.from_yaml(path)
