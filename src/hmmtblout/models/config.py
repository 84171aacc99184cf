"""
Pydantic configuration model for the tblout reader.

The header and metadata scanners rely on heuristics tuned to the banner shape
HMMER and Infernal write. Their tunables live here so that reports with a
different banner can be read without code changes. Configuration can be
loaded from YAML files or built from CLI arguments.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal, Self

from pydantic import BaseModel, Field, ValidationError

from hmmtblout.core.exceptions import InvalidConfigError

logger = logging.getLogger(__name__)


class ReaderConfig(BaseModel):
    """
    Configuration for TbloutReader.

    Attributes:
        header_miss_tolerance: Unrecognised comment lines tolerated before the
            header scan gives up
        meta_skip_lines: Leading comment lines the metadata scan ignores
        bounded_meta_scan: Stop the metadata scan once all eight keys are
            found instead of reading to end of input
        on_error: What records() does with a malformed line: raise the error
            or log and skip the line
    """

    header_miss_tolerance: int = Field(
        default=3,
        ge=0,
        description="Unrecognised comment lines tolerated before the header scan stops",
    )
    meta_skip_lines: int = Field(
        default=3,
        ge=0,
        description="Leading comment lines skipped by the metadata scan",
    )
    bounded_meta_scan: bool = Field(
        default=False,
        description=(
            "Stop the metadata scan once every key has been seen. The tools write "
            "metadata after the data, so this only saves work when a key repeats "
            "or trailing comments follow the block."
        ),
    )
    on_error: Literal["raise", "skip"] = Field(
        default="raise",
        description="Handling of malformed data lines in records()",
    )

    @classmethod
    def from_yaml(cls, path: Path) -> Self:
        """
        Load reader configuration from a YAML file.

        The YAML file uses a nested structure:

            header:
              miss_tolerance: 3
            meta:
              skip_lines: 3
              bounded_scan: false
            records:
              on_error: raise

        Unknown keys are ignored (forward compatibility).

        Args:
            path: Path to YAML configuration file.

        Returns:
            ReaderConfig populated from YAML values merged with defaults.

        Raises:
            FileNotFoundError: If YAML file does not exist.
            InvalidConfigError: If the YAML is not a mapping or holds invalid values.
        """
        import yaml

        raw = yaml.safe_load(path.read_text())
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise InvalidConfigError(
                str(path), f"expected a mapping, got {type(raw).__name__}"
            )

        flat = _flatten_yaml_config(raw)
        try:
            return cls(**flat)
        except ValidationError as e:
            raise InvalidConfigError(str(path), str(e)) from e

    def to_yaml_str(self) -> str:
        """
        Serialize reader configuration to a YAML string.

        Returns:
            YAML-formatted string with the nested structure from_yaml reads.
        """
        import yaml

        data = {
            "header": {"miss_tolerance": self.header_miss_tolerance},
            "meta": {
                "skip_lines": self.meta_skip_lines,
                "bounded_scan": self.bounded_meta_scan,
            },
            "records": {"on_error": self.on_error},
        }
        return yaml.dump(data, default_flow_style=False, sort_keys=False)

    def to_yaml(self, path: Path) -> None:
        """Write reader configuration to a YAML file."""
        path.write_text(self.to_yaml_str())

    model_config = {"frozen": True}


# Nested YAML location -> ReaderConfig field
_YAML_FIELDS: dict[tuple[str, str], str] = {
    ("header", "miss_tolerance"): "header_miss_tolerance",
    ("meta", "skip_lines"): "meta_skip_lines",
    ("meta", "bounded_scan"): "bounded_meta_scan",
    ("records", "on_error"): "on_error",
}


def _flatten_yaml_config(raw: dict[str, Any]) -> dict[str, Any]:
    """
    Flatten nested YAML config structure into ReaderConfig keyword arguments.

    Top-level keys that already name a ReaderConfig field are accepted too.
    """
    flat: dict[str, Any] = {}
    for (section, key), field in _YAML_FIELDS.items():
        block = raw.get(section)
        if isinstance(block, dict) and key in block:
            flat[field] = block[key]

    for key, value in raw.items():
        if key in ReaderConfig.model_fields and key not in flat:
            flat[key] = value
        elif key not in ReaderConfig.model_fields and not isinstance(value, dict):
            logger.debug("Ignoring unknown configuration key %r", key)

    return flat
