"""Pipeline definition loader for fieldext.

Reads YAML or JSON pipeline definitions and turns them into
``PipelineDefinition`` objects that a host wraps around its reducer.
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from io import StringIO
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from fieldext.common.exceptions import ConfigurationError, LoaderError
from fieldext.common.types import TransitionFn
from fieldext.core.config import PipelineConfig
from fieldext.core.extender import FieldExtender
from fieldext.core.pipeline import Pipeline
from fieldext.extenders.registry import ExtenderRegistry, get_default_registry
from fieldext.models import AnyExtenderEntry, PipelineFileConfig

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)


@dataclass(frozen=True)
class PipelineDefinition:
    """
    Ordered extenders plus the configuration they are bound with.

    This is what a host hands to its history container wrapper; ``build``
    composes it around the container's reducer.
    """

    extenders: tuple[FieldExtender, ...] = ()
    config: PipelineConfig = field(default_factory=PipelineConfig)
    description: str = ""

    def build(self, terminal: TransitionFn) -> Pipeline:
        """Compose the extenders around ``terminal``."""
        return Pipeline(self.extenders, terminal, self.config)


class PipelineLoader:
    """
    Loader for pipeline definition files.

    Extender entries are resolved through an ``ExtenderRegistry`` (the
    default registry unless another one is given).
    """

    def __init__(self, registry: ExtenderRegistry | None = None):
        """Initialize loader with ruamel configuration."""
        self.registry = registry if registry is not None else get_default_registry()
        self.yaml = YAML(typ="safe")
        self.yaml.default_flow_style = False

    def load(self, file_path: str | Path) -> PipelineDefinition:
        """
        Load a pipeline definition from a YAML or JSON file.

        Raises:
            LoaderError: If the file is missing or cannot be parsed
            ConfigurationError: If the definition is structurally invalid
            RegistryError: If an extender name is unknown
        """
        path = Path(file_path)
        data = self.read_file(path)
        logger.debug("Loaded pipeline definition from %s", path)
        return self.parse(data, source=str(path))

    def load_from_string(self, content: str, format: str = "yaml") -> PipelineDefinition:
        """Load a pipeline definition from a YAML or JSON string."""
        data = self._parse_content(content, format, source="<string>")
        return self.parse(data, source="<string>")

    def read_file(self, path: Path) -> Any:
        """
        Read a YAML or JSON data file, choosing the parser by suffix.

        Unknown suffixes are read as YAML, which also accepts JSON.
        """
        if not path.exists():
            raise LoaderError(f"File not found: {path}", file_path=str(path))

        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise LoaderError(f"Cannot read {path}: {e}", file_path=str(path)) from e

        format = "json" if path.suffix.lower() in JSON_SUFFIXES else "yaml"
        return self._parse_content(content, format, source=str(path))

    def _parse_content(self, content: str, format: str, source: str) -> Any:
        try:
            if format == "json":
                return json.loads(content)
            if format == "yaml":
                return self.yaml.load(StringIO(content))
        except json.JSONDecodeError as e:
            raise LoaderError(
                f"Invalid JSON in {source}: {e}", file_path=source, loader_type="json"
            ) from e
        except YAMLError as e:
            raise LoaderError(
                f"Invalid YAML in {source}: {e}", file_path=source, loader_type="yaml"
            ) from e

        raise LoaderError(f"Unsupported format '{format}'", file_path=source, loader_type=format)

    def parse(self, data: PipelineFileConfig | None, source: str = "<data>") -> PipelineDefinition:
        """Build a ``PipelineDefinition`` from already-parsed data."""
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise LoaderError(
                f"Pipeline definition must be a mapping at root level, got {type(data).__name__}",
                file_path=source,
            )

        config = PipelineConfig.from_dict(data.get("options"))

        entries = data.get("field_extenders") or []
        if not isinstance(entries, list):
            raise ConfigurationError(
                "'field_extenders' must be a list", config_key="field_extenders"
            )

        extenders = tuple(self._build_extender(entry, index) for index, entry in enumerate(entries))
        return PipelineDefinition(
            extenders=extenders,
            config=config,
            description=str(data.get("description") or ""),
        )

    def _build_extender(self, entry: AnyExtenderEntry, index: int) -> FieldExtender:
        if isinstance(entry, str):
            return self.registry.create(entry)

        if isinstance(entry, Mapping):
            options = dict(entry)
            name = options.pop("name", None)
            if not isinstance(name, str) or not name:
                raise ConfigurationError(
                    f"Extender entry #{index} is missing a 'name'",
                    config_key="field_extenders",
                    context={"entry": dict(entry)},
                )
            return self.registry.create(name, **options)

        raise ConfigurationError(
            f"Extender entry #{index} must be a name or a mapping, got {type(entry).__name__}",
            config_key="field_extenders",
        )


def load_pipeline(
    file_path: str | Path, registry: ExtenderRegistry | None = None
) -> PipelineDefinition:
    """Convenience wrapper around ``PipelineLoader.load``."""
    return PipelineLoader(registry).load(file_path)
