from typing import TypedDict, List, Dict, Optional, Literal

# Catalog File Types (spring-boot-properties.yml and user catalogs)
PropertyType = Literal["string", "integer", "boolean", "duration"]

class CatalogPropertyDefinition(TypedDict, total=False):
    type: PropertyType
    description: str
    default: Optional[str]
    enum: Optional[List[str]]

class CatalogFile(TypedDict):
    springls: int
    properties: Dict[str, CatalogPropertyDefinition]
