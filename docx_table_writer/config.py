"""Export configuration."""

from __future__ import annotations

import codecs
import json
import re
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict, Union
import logging

from .exceptions import ConfigError
from .utils.logger import LOG_LEVELS

logger = logging.getLogger(__name__)

# XML NCName start character and name characters (ASCII subset)
PREFIX_PATTERN = re.compile(r'[A-Za-z_][A-Za-z0-9_.-]*')
# ElementTree reserves ns0, ns1, ... for generated prefixes
RESERVED_PREFIX_PATTERN = re.compile(r'^ns\d+$')


@dataclass
class ExportConfig:
    """
    Settings shared by the XML exporter and the command line.

    Attributes:
        namespace_prefix: Prefix bound to the WordprocessingML namespace
        encoding: Output encoding
        pretty_print: Indent the generated XML
        indent: Spaces per indentation level when pretty printing
        redistribute_margins: Fit tables with a right margin into the page
        log_level: Level passed to logging configuration by the CLI
    """

    namespace_prefix: str = 'w'
    encoding: str = 'utf-8'
    pretty_print: bool = False
    indent: int = 2
    redistribute_margins: bool = True
    log_level: str = 'WARNING'

    def __post_init__(self):
        prefix = self.namespace_prefix
        if not isinstance(prefix, str) or not PREFIX_PATTERN.fullmatch(prefix):
            raise ConfigError("Invalid namespace prefix", repr(prefix))
        if RESERVED_PREFIX_PATTERN.match(prefix) or prefix.lower().startswith('xml'):
            raise ConfigError("Reserved namespace prefix", repr(prefix))
        try:
            codecs.lookup(self.encoding)
        except (LookupError, TypeError) as e:
            raise ConfigError("Unknown output encoding", repr(self.encoding)) from e
        if not isinstance(self.indent, int) or self.indent < 0:
            raise ConfigError("Indent must be a non-negative integer", repr(self.indent))
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"Invalid log level: {self.log_level}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ExportConfig':
        """Build configuration from a mapping; unknown keys are rejected."""
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a JSON object")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError("Unknown configuration keys", ", ".join(unknown))
        return cls(**data)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'ExportConfig':
        """Load configuration from a JSON file."""
        path = Path(path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read configuration file {path}", str(e)) from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}", str(e)) from e
        logger.debug(f"Loaded export configuration from {path}")
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
