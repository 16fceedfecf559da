"""Pydantic option models for tagdown conversions."""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, Field


class ConversionOptions(BaseModel):
    """
    Options controlling a single HTML to Markdown conversion.

    Example:
        options = ConversionOptions(absolute=True, base_uri="https://example.com/docs/")

    YAML format:
        absolute: true
        baseUri: https://example.com/docs/
        inline: false
    """

    absolute: bool = Field(False, description="Emit absolute URLs for anchors and images")
    base_uri: Optional[str] = Field(
        None,
        alias="baseUri",
        description="Base URI used to resolve relative URLs (defaults to the window's base URI)",
    )
    inline: bool = Field(False, description="Emit inline links/images instead of reference-style ones")
    max_depth: Optional[int] = Field(
        None,
        ge=1,
        alias="maxDepth",
        description="Maximum element nesting depth (None = unbounded)",
    )

    model_config = {"extra": "forbid", "populate_by_name": True}

    @classmethod
    def parse(cls, value: Union["ConversionOptions", Mapping[str, Any], None]) -> "ConversionOptions":
        """Coerce ``None``, a mapping or an existing instance into options."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        return cls.model_validate(dict(value))

    def to_yaml(self) -> str:
        """Serialize options to a YAML string."""
        import yaml

        return yaml.dump(self.model_dump(mode="json", exclude_none=True), default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConversionOptions":
        """Load options from a YAML string."""
        import yaml

        data = yaml.safe_load(yaml_str)
        return cls.parse(data)

    @classmethod
    def from_yaml_file(cls, path: Path) -> "ConversionOptions":
        """Load options from a YAML file."""
        return cls.from_yaml(Path(path).read_text())

    @classmethod
    def from_json_file(cls, path: Path) -> "ConversionOptions":
        """Load options from a JSON file."""
        with open(path) as f:
            return cls.parse(json.load(f))

    @classmethod
    def from_file(cls, path: Path) -> "ConversionOptions":
        """
        Load options from file (auto-detect format).

        Args:
            path: Path to a ``.yaml``, ``.yml`` or ``.json`` file

        Returns:
            ConversionOptions instance

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file format is not supported
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Options file not found: {path}")

        suffix = path.suffix.lower()
        if suffix in [".yaml", ".yml"]:
            return cls.from_yaml_file(path)
        elif suffix == ".json":
            return cls.from_json_file(path)
        else:
            raise ValueError(f"Unsupported options file format: {suffix}")
