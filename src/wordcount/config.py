"""Configuration for word count reports."""

import codecs
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

DEFAULT_INPUT = "input.txt"
DEFAULT_OUTPUT = "output.txt"
DEFAULT_ENCODING = "utf-8"

_KNOWN_KEYS = {"input", "output", "encoding"}


@dataclass
class ReportConfig:
    """Settings for a single report run."""

    input_path: Path = field(default_factory=lambda: Path(DEFAULT_INPUT))
    output_path: Path = field(default_factory=lambda: Path(DEFAULT_OUTPUT))
    encoding: str = DEFAULT_ENCODING
    base_dir: Path = field(default_factory=Path.cwd)

    @classmethod
    def from_dict(cls, data: dict[str, Any], base_dir: Path | None = None) -> "ReportConfig":
        """Create ReportConfig from a YAML dict.

        Args:
            data: Mapping with optional ``input``, ``output`` and ``encoding`` keys.
            base_dir: Directory that relative paths are resolved against.
                Defaults to the current working directory.

        Raises:
            ValueError: If the mapping contains unknown keys or names an
                unknown encoding.
        """
        unknown = set(data) - _KNOWN_KEYS
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        # Keys left empty in YAML load as None
        encoding = data.get("encoding") or DEFAULT_ENCODING
        try:
            codecs.lookup(encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {encoding}") from e

        return cls(
            input_path=Path(data.get("input") or DEFAULT_INPUT),
            output_path=Path(data.get("output") or DEFAULT_OUTPUT),
            encoding=encoding,
            base_dir=base_dir if base_dir is not None else Path.cwd(),
        )

    @classmethod
    def from_yaml(cls, path: Path) -> "ReportConfig":
        """Load report configuration from a YAML file.

        Library entry point only; the CLI takes no flags and always runs
        with the defaults plus its optional input argument. Relative input
        and output paths are resolved against the directory containing the
        YAML file.
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data, base_dir=path.parent.resolve())

    def with_input(self, input_path: Path) -> "ReportConfig":
        """Return a copy of this config reading from another input file."""
        return replace(self, input_path=Path(input_path))

    def resolve_input(self) -> Path:
        """Return the input path, made absolute against base_dir if relative."""
        return self._resolve(self.input_path)

    def resolve_output(self) -> Path:
        """Return the output path, made absolute against base_dir if relative."""
        return self._resolve(self.output_path)

    def _resolve(self, path: Path) -> Path:
        if not path.is_absolute():
            path = self.base_dir / path
        return path
