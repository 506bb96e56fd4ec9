"""
Property catalog loading for springls.

The catalog is a static table of Spring Boot configuration properties keyed by
their fully-qualified dotted name. It is loaded once at startup from the bundled
YAML data file (plus any user supplied catalog files), validated against a JSON
Schema, and exposed as an immutable PropertyCatalog shared by every request.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

import yaml
from jsonschema import validate, ValidationError

from springls.config.types import CatalogFile, CatalogPropertyDefinition

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "spring-boot-properties.yml"
CATALOG_SCHEMA_PATH = Path(__file__).parent / "schemas" / "catalog-schema-1.json"


class CatalogError(ValueError):
    """Raised when a catalog file cannot be read or fails validation."""
    pass


@dataclass(frozen=True)
class PropertyEntry:
    """
    Metadata for a single documented configuration property.

    Attributes:
        name: Fully-qualified dotted property name (e.g. "server.port")
        type: One of "string", "integer", "boolean", "duration"
        description: Human-readable description
        default: Optional default value, kept as text
        enum: Optional ordered tuple of allowed literal values
    """
    name: str
    type: str
    description: str
    default: Optional[str] = None
    enum: Optional[Tuple[str, ...]] = None

    @classmethod
    def from_definition(cls, name: str, definition: CatalogPropertyDefinition) -> "PropertyEntry":
        enum = definition.get("enum")
        default = definition.get("default")
        if enum and default is not None and default not in enum:
            raise CatalogError(
                f"Property '{name}' has default '{default}' which is not one of its enum values"
            )
        return cls(
            name=name,
            type=definition["type"],
            description=definition["description"],
            default=default,
            enum=tuple(enum) if enum else None,
        )


class PropertyCatalog:
    """
    Read-only table of PropertyEntry objects keyed by dotted name.

    Keys are matched case-sensitively. The instance is never mutated after
    construction, so it can be shared freely between requests.
    """

    def __init__(self, entries: Iterable[PropertyEntry]):
        table: Dict[str, PropertyEntry] = {}
        for entry in entries:
            table[entry.name] = entry
        self._entries: Mapping[str, PropertyEntry] = MappingProxyType(table)
        self._keys: Tuple[str, ...] = tuple(sorted(table))

    @property
    def entries(self) -> Mapping[str, PropertyEntry]:
        return self._entries

    def keys(self) -> Tuple[str, ...]:
        """All property names in lexicographic order."""
        return self._keys

    def get(self, path: str) -> Optional[PropertyEntry]:
        return self._entries.get(path)

    def has_descendants(self, path: str) -> bool:
        """Check whether any property lives strictly below the given dotted path."""
        prefix = path + "."
        return any(key.startswith(prefix) for key in self._keys)

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __repr__(self) -> str:
        return f"PropertyCatalog({len(self)} properties)"


def _load_schema() -> dict:
    with open(CATALOG_SCHEMA_PATH) as schema_file:
        return json.load(schema_file)


def load_catalog_file(path: Path) -> List[PropertyEntry]:
    """Load and validate a single catalog file.

    Args:
        path: Path to a YAML catalog file

    Returns:
        The property entries defined in the file

    Raises:
        CatalogError: If the file is missing, is not valid YAML or fails schema validation
    """
    path = Path(path)
    if not path.exists():
        raise CatalogError(f"Catalog file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise CatalogError(f"Catalog file {path} is not valid YAML: {e}")

    try:
        validate(instance=data, schema=_load_schema())
    except ValidationError as e:
        raise CatalogError(f"Catalog validation error in {path}: {e.message}")

    catalog: CatalogFile = data
    entries = [
        PropertyEntry.from_definition(name, definition)
        for name, definition in catalog["properties"].items()
    ]
    logger.debug(f"Loaded {len(entries)} properties from {path}")
    return entries


def load_catalog(extra_paths: Optional[Iterable[Path]] = None, include_default: bool = True) -> PropertyCatalog:
    """Build the process-wide property catalog.

    Entries from later files override entries with the same name from earlier
    ones, so user catalogs can both extend and redefine bundled properties.

    Args:
        extra_paths: Additional catalog files, applied in order after the bundled one
        include_default: Whether to load the bundled Spring Boot catalog first

    Returns:
        The immutable property catalog
    """
    paths: List[Path] = []
    if include_default:
        paths.append(DEFAULT_CATALOG_PATH)
    paths.extend(Path(p) for p in (extra_paths or []))

    merged: Dict[str, PropertyEntry] = {}
    for path in paths:
        for entry in load_catalog_file(path):
            if entry.name in merged:
                logger.info(f"Property '{entry.name}' redefined by {path}")
            merged[entry.name] = entry

    catalog = PropertyCatalog(merged.values())
    logger.info(f"Property catalog ready with {len(catalog)} properties")
    return catalog
