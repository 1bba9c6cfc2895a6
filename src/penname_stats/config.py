from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

OUTPUT_FORMATS = ("table", "json")


@dataclass(slots=True)
class StatsConfig:
    """Configuration options for the comparison report."""

    official_label: str = "Official"
    pseudonym_label: str = "Pseudonym"
    precision: int = 2
    output_format: str = "table"
    include_punctuation: bool = True
    encoding: str = "utf-8"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        for name in (
            "official_label",
            "pseudonym_label",
            "output_format",
            "encoding",
            "log_level",
        ):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string; got {value!r}.")
        # bool is an int subclass
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise ValueError(f"precision must be an integer; got {self.precision!r}.")
        if not isinstance(self.include_punctuation, bool):
            raise ValueError(
                f"include_punctuation must be true or false; got {self.include_punctuation!r}."
            )
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}; "
                f"got {self.output_format!r}."
            )
        if self.precision < 0:
            raise ValueError("precision must be zero or positive.")

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def config_from_dict(data: Mapping[str, Any] | None) -> StatsConfig:
    """Build a StatsConfig from a dictionary-like input, ignoring unknown keys."""
    if data is None:
        return StatsConfig()
    allowed = {field.name for field in fields(StatsConfig)}
    return StatsConfig(**{key: data[key] for key in data if key in allowed})


def config_from_yaml(path: str | Path) -> StatsConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> StatsConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return StatsConfig()
    return config_from_yaml(path)
