"""Documentation model loader.

Parses the JSON document the documentation generator embeds in its output
(``{"packages": [...], "searchIndex": [...]}``, camelCase keys, null fields
omitted) into the immutable domain model.
"""

import json
from pathlib import Path
from typing import Any, Iterator

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from docnav.domain.types import DocumentationModel, SearchCategory, SearchIndexEntry, TypeRecord
from docnav.infrastructure.registry import MemoryTypeRegistry
from docnav.logger import get_logger

logger = get_logger("model_loader")


class TypeInfoModel(BaseModel):
    """A serialized type. Only the fields the query layer needs are declared."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    kind: str = Field(..., description="class, interface, enum or annotation")
    name: str = Field(..., description="Simple name")
    qualified_name: str = Field(..., alias="qualifiedName")
    inner_types: list["TypeInfoModel"] = Field(default_factory=list, alias="innerTypes")


class PackageInfoModel(BaseModel):
    """A serialized package and its top-level types."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str = ""
    types: list[TypeInfoModel] = Field(default_factory=list)


class SearchIndexEntryModel(BaseModel):
    """A serialized search index entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    category: SearchCategory
    name: str
    qualified_name: str = Field(..., alias="qualifiedName")
    package_name: str = Field("", alias="packageName")
    type_name: str | None = Field(None, alias="typeName")
    signature: str | None = None
    return_type: str | None = Field(None, alias="returnType")

    def to_entry(self) -> SearchIndexEntry:
        return SearchIndexEntry(
            category=self.category,
            name=self.name,
            qualified_name=self.qualified_name,
            package_name=self.package_name,
            type_name=self.type_name,
            signature=self.signature,
            return_type=self.return_type,
        )


class DocumentationModelData(BaseModel):
    """Top-level serialized documentation model."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    packages: list[PackageInfoModel] = Field(default_factory=list)
    search_index: list[SearchIndexEntryModel] = Field(default_factory=list, alias="searchIndex")


TypeInfoModel.model_rebuild()


def iter_type_records(packages: list[PackageInfoModel]) -> Iterator[TypeRecord]:
    """
    Yield a record for every type, nested types right after their enclosing type.

    Args:
        packages: Serialized packages in generator order

    Yields:
        TypeRecord instances in registry iteration order
    """
    for package in packages:
        stack = list(reversed(package.types))
        while stack:
            type_info = stack.pop()
            yield TypeRecord(
                qualified_name=type_info.qualified_name,
                name=type_info.name,
                package_name=package.name,
                kind=type_info.kind,
            )
            stack.extend(reversed(type_info.inner_types))


def build_documentation_model(data: dict[str, Any]) -> DocumentationModel:
    """
    Validate raw model data and convert it to the domain model.

    Args:
        data: Decoded JSON document

    Returns:
        DocumentationModel with its search index and type registry

    Raises:
        ValidationError: If the structure is invalid
    """
    parsed = DocumentationModelData.model_validate(data)
    registry = MemoryTypeRegistry(iter_type_records(parsed.packages))
    return DocumentationModel(
        search_index=tuple(entry.to_entry() for entry in parsed.search_index),
        registry=registry,
        package_names=tuple(package.name for package in parsed.packages),
    )


def load_documentation_model(model_path: str | Path) -> DocumentationModel:
    """
    Load a documentation model from a JSON file.

    Args:
        model_path: Path to the serialized model

    Returns:
        DocumentationModel: Parsed model

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the JSON file is invalid
        ValidationError: If the model structure is invalid
    """
    model_path = Path(model_path)

    if not model_path.exists():
        error_msg = f"Documentation model not found: {model_path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    logger.info(f"Loading documentation model from: {model_path}")

    try:
        with open(model_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in documentation model {model_path}: {e}")
        raise

    try:
        model = build_documentation_model(data)
    except ValidationError as e:
        logger.error(f"Invalid documentation model structure in {model_path}: {e}")
        raise

    logger.info(
        f"Loaded {len(model.package_names)} package(s), "
        f"{len(model.registry)} type(s), {len(model.search_index)} index entries"
    )
    return model
