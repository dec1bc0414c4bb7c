# wsdl-structure-analyzer/backend/wsdl_analyzer/models.py
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator
from pydantic.alias_generators import to_camel

# A structure preview is usually free text or a JSON-like field tree, but
# stored records are not policed, so anything JSON can hold is accepted.
Structure = Any


class CamelModel(BaseModel):
    """snake_case attributes, camelCase on the wire (the UI's field names)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProcessingMode(str, Enum):
    SYNCHRONOUS = "SYNCHRONOUS"
    ASYNCHRONOUS = "ASYNCHRONOUS"


class Operation(CamelModel):
    name: str
    has_input: bool = False
    has_output: bool = False
    has_fault: bool = False
    soap_action: Optional[str] = None


class NamespaceInfo(CamelModel):
    uri: str = ""
    prefix: str = ""
    target_namespace: str = ""
    schema_location: Optional[str] = None


class OperationInfo(CamelModel):
    request: Optional[Structure] = None
    response: Optional[Structure] = None
    fault: Optional[Structure] = None
    has_input: Optional[bool] = None
    has_output: Optional[bool] = None
    has_fault: Optional[bool] = None


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


_FLAG_KEYS = {"hasInput", "hasOutput", "hasFault", "has_input", "has_output", "has_fault"}
_STRING_KEYS = {"endpointUrl", "endpoint_url", "usage"}
_OPERATION_INFO_KEYS = ("operationInfo", "operation_info")


def _without_mistyped_values(data: Dict[str, Any], path: str, ignored: List[str]) -> Dict[str, Any]:
    cleaned = dict(data)
    for key, value in data.items():
        if value is None:
            continue
        if (key in _FLAG_KEYS and not isinstance(value, bool)) or (key in _STRING_KEYS and not isinstance(value, str)):
            ignored.append(f"Ignored metadata value {path}{key}={value!r}")
            cleaned[key] = None
    return cleaned


class StructureMetadata(CamelModel):
    """Previously derived structure description, read from either legacy shape.

    Older records keep the message structures at the top level
    (``requestStructure``...), newer ones nest them under ``operationInfo``
    (``operationInfo.request``...). Validation folds the nested shape into the
    flat fields once, so readers only ever look at the flat fields. Flat values
    win when both are present.

    Stored metadata is not policed. A flag that is not a boolean, or an
    endpoint/usage that is not a string, is dropped and listed in
    ``ignored_values`` instead of failing the whole record.
    """
    model_config = ConfigDict(extra="allow")

    request_structure: Optional[Structure] = None
    response_structure: Optional[Structure] = None
    fault_structure: Optional[Structure] = None
    has_input: Optional[bool] = None
    has_output: Optional[bool] = None
    has_fault: Optional[bool] = None
    endpoint_url: Optional[str] = None
    usage: Optional[str] = None
    operation_info: Optional[OperationInfo] = None

    _ignored_values: List[str] = PrivateAttr(default_factory=list)

    @property
    def ignored_values(self) -> List[str]:
        return list(self._ignored_values)

    @model_validator(mode="wrap")
    @classmethod
    def _drop_mistyped_values(cls, data: Any, handler) -> "StructureMetadata":
        if not isinstance(data, dict):
            return handler(data)

        ignored: List[str] = []
        data = _without_mistyped_values(data, "", ignored)
        for key in _OPERATION_INFO_KEYS:
            info = data.get(key)
            if isinstance(info, dict):
                data[key] = _without_mistyped_values(info, "operationInfo.", ignored)
            elif info is not None and not isinstance(info, OperationInfo):
                ignored.append(f"Ignored metadata value {key}={info!r}")
                data[key] = None

        metadata = handler(data)
        metadata._ignored_values = ignored
        return metadata

    @model_validator(mode="after")
    def _fold_operation_info(self) -> "StructureMetadata":
        info = self.operation_info
        if info is None:
            return self
        for flat, nested in (
            ("request_structure", "request"),
            ("response_structure", "response"),
            ("fault_structure", "fault"),
        ):
            if _is_empty(getattr(self, flat)) and not _is_empty(getattr(info, nested)):
                setattr(self, flat, getattr(info, nested))
        for flag in ("has_input", "has_output", "has_fault"):
            if getattr(self, flag) is None and getattr(info, flag) is not None:
                setattr(self, flag, getattr(info, flag))
        return self


# The namespace field of a structure record arrives as a structured object,
# as a JSON-encoded string, or as some other opaque string.
NamespaceField = Union[NamespaceInfo, Dict[str, Any], str]


class RawContent(CamelModel):
    kind: Literal["raw"] = "raw"
    text: str
    metadata: Optional[StructureMetadata] = None
    namespace: Optional[NamespaceField] = None


class MetadataOnly(CamelModel):
    kind: Literal["metadata"] = "metadata"
    metadata: StructureMetadata = Field(default_factory=StructureMetadata)
    namespace: Optional[NamespaceField] = None


WsdlSource = Annotated[Union[RawContent, MetadataOnly], Field(discriminator="kind")]


class StructureSet(CamelModel):
    request: Optional[Structure] = None
    response: Optional[Structure] = None
    fault: Optional[Structure] = None

    def is_empty(self) -> bool:
        return self.request is None and self.response is None and self.fault is None


class AnalysisResult(CamelModel):
    operations: List[Operation] = Field(default_factory=list)
    processing_mode: ProcessingMode
    endpoint_url: Optional[str] = None
    namespace_info: Optional[NamespaceInfo] = None
    structures: StructureSet = Field(default_factory=StructureSet)
    single_match: bool = False
    suggested_name: Optional[str] = None
    warnings: List[str] = Field(default_factory=list)


# --- Structure store records ---

class StructureRecord(CamelModel):
    """A record as returned by the structure store's ``GET /structures/{id}``."""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    usage: Optional[str] = None
    original_content: Optional[str] = None
    metadata: Optional[StructureMetadata] = None
    namespace: Optional[NamespaceField] = None


class WsdlStructureSummary(CamelModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    name: str
    endpoint_url: str = ""


# --- API payloads ---

class StructureAnalysisRequest(StructureRecord):
    processing_mode: ProcessingMode = ProcessingMode.ASYNCHRONOUS


class SoapActionOption(CamelModel):
    operation_name: str
    soap_action: str


class SuggestionRequest(CamelModel):
    configuration: Dict[str, Any] = Field(default_factory=dict)
    analysis: AnalysisResult
    edited_fields: List[str] = Field(default_factory=list)


class SuggestionResponse(CamelModel):
    configuration: Dict[str, Any]
    soap_action_options: List[SoapActionOption]


class HealthResponse(BaseModel):
    status: str
