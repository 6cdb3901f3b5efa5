# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SARIF 2.1.0 input models.

Only the parts of the SARIF object graph the report reads are modelled.
Every field is optional and unknown keys are kept. Fields with an
unexpected type are coerced rather than rejected, so one odd result never
aborts the report:

- text fields accept numbers and booleans as their string form; objects
  and arrays read as absent
- object fields that hold a non-object read as absent
- list fields that hold a non-list read as empty, and non-object entries
  of object lists are dropped (location entries become ``None`` so the
  first location keeps its position)

Only a document without a ``runs`` list is rejected.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from sarifmd.core.constants import SEVERITY_OVERRIDE_PROPERTY
from sarifmd.core.exceptions import MalformedSarifError


def _list_or_empty(v: object) -> list[Any]:
    return v if isinstance(v, list) else []


def _objects_only(v: object) -> list[Any]:
    return [item for item in _list_or_empty(v) if isinstance(item, (dict, BaseModel))]


def _object_or_none(v: object) -> object:
    return v if isinstance(v, (dict, BaseModel)) else None


def _text_or_none(v: object) -> str | None:
    if v is None or isinstance(v, str):
        return v
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    if isinstance(v, (int, float)):
        return str(v)
    return None


def _line_or_none(v: object) -> int | str | None:
    if isinstance(v, bool):
        return None
    return v if isinstance(v, (int, str)) else None


SarifText = Annotated[str | None, BeforeValidator(_text_or_none)]
SarifLine = Annotated[int | str | None, BeforeValidator(_line_or_none)]


class SarifModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class SarifMessage(SarifModel):
    text: SarifText = None


class SarifArtifactLocation(SarifModel):
    uri: SarifText = None


class SarifRegion(SarifModel):
    startLine: SarifLine = None
    endLine: SarifLine = None
    startColumn: SarifLine = None
    endColumn: SarifLine = None


class SarifPhysicalLocation(SarifModel):
    artifactLocation: SarifArtifactLocation | None = None
    region: SarifRegion | None = None

    @field_validator("artifactLocation", "region", mode="before")
    @classmethod
    def _parse_objects(cls, v: object) -> object:
        return _object_or_none(v)


class SarifLocation(SarifModel):
    physicalLocation: SarifPhysicalLocation | None = None

    @field_validator("physicalLocation", mode="before")
    @classmethod
    def _parse_physical_location(cls, v: object) -> object:
        return _object_or_none(v)


class SarifRuleConfig(SarifModel):
    level: SarifText = None


class SarifRelationshipTarget(SarifModel):
    id: SarifText = None
    guid: SarifText = None


class SarifRelationship(SarifModel):
    target: SarifRelationshipTarget | None = None

    @field_validator("target", mode="before")
    @classmethod
    def _parse_target(cls, v: object) -> object:
        return _object_or_none(v)


class SarifRule(SarifModel):
    id: SarifText = None
    name: SarifText = None
    shortDescription: SarifMessage | None = None
    fullDescription: SarifMessage | None = None
    helpUri: SarifText = None
    help: SarifMessage | None = None
    defaultConfiguration: SarifRuleConfig | None = None
    relationships: list[SarifRelationship] = Field(default_factory=list)

    @field_validator(
        "shortDescription", "fullDescription", "help", "defaultConfiguration",
        mode="before",
    )
    @classmethod
    def _parse_objects(cls, v: object) -> object:
        return _object_or_none(v)

    @field_validator("relationships", mode="before")
    @classmethod
    def _parse_relationships(cls, v: object) -> list[Any]:
        return _objects_only(v)


class SarifDriver(SarifModel):
    name: SarifText = None
    version: SarifText = None
    rules: list[SarifRule] = Field(default_factory=list)

    @field_validator("rules", mode="before")
    @classmethod
    def _parse_rules(cls, v: object) -> list[Any]:
        return _objects_only(v)


class SarifTool(SarifModel):
    driver: SarifDriver | None = None

    @field_validator("driver", mode="before")
    @classmethod
    def _parse_driver(cls, v: object) -> object:
        return _object_or_none(v)


class SarifPropertyBag(SarifModel):
    severity_override: SarifText = Field(default=None, alias=SEVERITY_OVERRIDE_PROPERTY)
    tags: list[Any] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def _parse_tags(cls, v: object) -> list[Any]:
        return _list_or_empty(v)


class SarifResult(SarifModel):
    ruleId: SarifText = None
    level: SarifText = None
    message: SarifMessage | None = None
    locations: list[SarifLocation | None] = Field(default_factory=list)
    properties: SarifPropertyBag | None = None

    @field_validator("message", "properties", mode="before")
    @classmethod
    def _parse_objects(cls, v: object) -> object:
        return _object_or_none(v)

    @field_validator("locations", mode="before")
    @classmethod
    def _parse_locations(cls, v: object) -> list[Any]:
        return [_object_or_none(item) for item in _list_or_empty(v)]


class SarifRun(SarifModel):
    tool: SarifTool | None = None
    results: list[SarifResult] = Field(default_factory=list)

    @field_validator("tool", mode="before")
    @classmethod
    def _parse_tool(cls, v: object) -> object:
        return _object_or_none(v)

    @field_validator("results", mode="before")
    @classmethod
    def _parse_results(cls, v: object) -> list[Any]:
        return _objects_only(v)


class SarifLog(SarifModel):
    version: SarifText = None
    runs: list[SarifRun]

    @field_validator("runs", mode="before")
    @classmethod
    def _parse_runs(cls, v: object) -> object:
        return _objects_only(v) if isinstance(v, list) else v


def parse_sarif(data: object) -> SarifLog:
    """Validate a decoded SARIF document.

    Raises:
        MalformedSarifError: If *data* is not an object with a ``runs`` list.
    """
    if isinstance(data, SarifLog):
        return data
    if not isinstance(data, dict) or not isinstance(data.get("runs"), list):
        raise MalformedSarifError("Provided SARIF content does not contain any runs.")
    try:
        return SarifLog.model_validate(data)
    except ValidationError as exc:
        msg = f"Provided SARIF content is malformed: {exc.error_count()} invalid field(s)"
        raise MalformedSarifError(msg) from exc
