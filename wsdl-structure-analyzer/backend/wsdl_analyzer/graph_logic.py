# wsdl-structure-analyzer/backend/wsdl_analyzer/graph_logic.py
"""WSDL analysis pipeline.

Every step is a graph node that returns a partial state update. A node that
fails records a warning and falls back to its documented default, so a broken
or partial WSDL still produces a usable ``AnalysisResult``.
"""
import functools
import logging
import operator
from typing import Annotated, Any, Callable, Dict, List, Optional, TypedDict, Union

from langgraph.graph import END, StateGraph
from pydantic import TypeAdapter

from . import config
from .endpoint import resolve_endpoint
from .errors import NoOperationsFound, NoSoapAddressFound
from .metadata_fallback import structures_from_metadata
from .models import (
    AnalysisResult,
    MetadataOnly,
    NamespaceInfo,
    Operation,
    ProcessingMode,
    RawContent,
    StructureSet,
    WsdlSource,
)
from .namespaces import resolve_namespace
from .processing_mode import DEFAULT_PROCESSING_MODE, DEFAULT_PROCESSING_MODE_ON_ERROR, classify_processing_mode
from .schema_structures import extract_structures
from .wsdl_parser import attach_soap_actions, extract_operations, extract_soap_actions, suggest_structure_name
from .xml_document import parse_document

logger = logging.getLogger(__name__)

_source_adapter = TypeAdapter(WsdlSource)


# --- Graph State Definition ---
class AnalysisState(TypedDict, total=False):
    """Represents the state of one analysis run."""
    # Inputs
    source: Union[RawContent, MetadataOnly]
    current_mode: ProcessingMode

    # Intermediate state
    root: Any
    parse_failed: bool
    operations: List[Operation]
    namespace_info: Optional[NamespaceInfo]
    endpoint_url: Optional[str]
    processing_mode: ProcessingMode
    structures: StructureSet

    # Final output
    result: AnalysisResult

    # Utilities
    warnings: Annotated[List[str], operator.add]


def _is_raw(state: AnalysisState) -> bool:
    return isinstance(state["source"], RawContent)


def guarded(step: str, default: Callable[[AnalysisState], Dict[str, Any]]):
    """Turns an exception inside a node into a warning plus the node's default update."""
    def decorator(node):
        @functools.wraps(node)
        def wrapper(state: AnalysisState) -> Dict[str, Any]:
            try:
                return node(state)
            except Exception as e:
                logger.warning("Step %s failed, using its default: %s", step, e, exc_info=True)
                update = default(state)
                update["warnings"] = [f"{step} failed: {e}"]
                return update
        return wrapper
    return decorator


# --- Node Functions ---

@guarded("parse_document", lambda state: {"root": None, "parse_failed": True})
def parse_document_node(state: AnalysisState) -> Dict[str, Any]:
    """Parses the raw WSDL text into a namespace-aware tree."""
    logger.debug("--- Parsing WSDL ---")
    parsed = parse_document(state["source"].text, max_length=config.WSDL_MAX_DOCUMENT_LENGTH)
    if not parsed.ok:
        return {"root": None, "parse_failed": True, "warnings": [parsed.error.as_warning()]}
    return {"root": parsed.root, "parse_failed": False}


@guarded("extract_operations", lambda state: {"operations": []})
def extract_operations_node(state: AnalysisState) -> Dict[str, Any]:
    """Lists portType operations (or binding operations when portTypes are empty)."""
    logger.debug("--- Extracting Operations ---")
    root = state.get("root")
    if root is None:
        return {"operations": []}
    operations = extract_operations(root)
    if not operations:
        return {"operations": [], "warnings": [NoOperationsFound("WSDL declares no named operations").as_warning()]}
    return {"operations": operations}


@guarded("extract_soap_actions", lambda state: {"operations": state.get("operations", [])})
def extract_soap_actions_node(state: AnalysisState) -> Dict[str, Any]:
    """Attaches each operation's soapAction from the SOAP 1.1/1.2 bindings."""
    logger.debug("--- Extracting SOAP Actions ---")
    operations = state.get("operations", [])
    root = state.get("root")
    if root is None or not operations:
        return {"operations": operations}
    actions = extract_soap_actions(root, [op.name for op in operations])
    return {"operations": attach_soap_actions(operations, actions)}


@guarded("resolve_namespace", lambda state: {"namespace_info": None})
def resolve_namespace_node(state: AnalysisState) -> Dict[str, Any]:
    logger.debug("--- Resolving Namespace ---")
    info, warnings = resolve_namespace(state.get("root"), state["source"].namespace)
    return {"namespace_info": info, "warnings": warnings}


@guarded("resolve_endpoint", lambda state: {"endpoint_url": None})
def resolve_endpoint_node(state: AnalysisState) -> Dict[str, Any]:
    logger.debug("--- Resolving Endpoint ---")
    source = state["source"]
    # The raw-content scan only exists for raw content.
    root = state.get("root") if _is_raw(state) else None
    resolution = resolve_endpoint(source.metadata, source.namespace, root)
    if resolution.url is None and _is_raw(state) and not state.get("parse_failed"):
        return {
            "endpoint_url": None,
            "warnings": [NoSoapAddressFound("no endpoint in metadata, namespace or soap:address").as_warning()],
        }
    return {"endpoint_url": resolution.url}


@guarded("classify_processing_mode", lambda state: {"processing_mode": DEFAULT_PROCESSING_MODE_ON_ERROR})
def classify_processing_mode_node(state: AnalysisState) -> Dict[str, Any]:
    logger.debug("--- Classifying Processing Mode ---")
    mode = classify_processing_mode(state.get("operations", []), parse_failed=state.get("parse_failed", False))
    return {"processing_mode": mode}


@guarded("derive_structures", lambda state: {"structures": StructureSet()})
def derive_structures_node(state: AnalysisState) -> Dict[str, Any]:
    """Structures from the document's schema; stored metadata fills the gaps."""
    logger.debug("--- Deriving Structures ---")
    metadata = state["source"].metadata
    derived = extract_structures(state.get("root"))
    stored, _ = structures_from_metadata(metadata)
    return {
        "structures": StructureSet(
            request=derived.request if derived.request is not None else stored.request,
            response=derived.response if derived.response is not None else stored.response,
            fault=derived.fault if derived.fault is not None else stored.fault,
        ),
        # Flags stay quiet on this path; dropped values are still reported.
        "warnings": metadata.ignored_values if metadata else [],
    }


@guarded("read_metadata", lambda state: {"structures": StructureSet()})
def read_metadata_node(state: AnalysisState) -> Dict[str, Any]:
    """Metadata-only path: structures and informational flags from the stored record."""
    logger.debug("--- Reading Structure Metadata ---")
    structures, warnings = structures_from_metadata(state["source"].metadata)
    return {"structures": structures, "warnings": warnings}


def finalize_node(state: AnalysisState) -> Dict[str, Any]:
    """Assembles the AnalysisResult."""
    operations = state.get("operations", [])
    if _is_raw(state):
        mode = state.get("processing_mode", DEFAULT_PROCESSING_MODE_ON_ERROR)
    else:
        # Metadata flags never override the caller's current mode.
        mode = state.get("current_mode", DEFAULT_PROCESSING_MODE)
    result = AnalysisResult(
        operations=operations,
        processing_mode=mode,
        endpoint_url=state.get("endpoint_url"),
        namespace_info=state.get("namespace_info"),
        structures=state.get("structures") or StructureSet(),
        single_match=len(operations) == 1,
        suggested_name=suggest_structure_name(operations),
        warnings=list(state.get("warnings", [])),
    )
    return {"result": result}


# --- Graph Assembly ---

def route_source(state: AnalysisState) -> str:
    return "raw" if _is_raw(state) else "metadata"


workflow = StateGraph(AnalysisState)

workflow.add_node("parse_document", parse_document_node)
workflow.add_node("extract_operations", extract_operations_node)
workflow.add_node("extract_soap_actions", extract_soap_actions_node)
workflow.add_node("read_metadata", read_metadata_node)
workflow.add_node("resolve_namespace", resolve_namespace_node)
workflow.add_node("resolve_endpoint", resolve_endpoint_node)
workflow.add_node("classify_processing_mode", classify_processing_mode_node)
workflow.add_node("derive_structures", derive_structures_node)
workflow.add_node("finalize", finalize_node)

workflow.set_conditional_entry_point(route_source, {"raw": "parse_document", "metadata": "read_metadata"})
workflow.add_edge("parse_document", "extract_operations")
workflow.add_edge("extract_operations", "extract_soap_actions")
workflow.add_edge("extract_soap_actions", "resolve_namespace")
workflow.add_edge("read_metadata", "resolve_namespace")
workflow.add_edge("resolve_namespace", "resolve_endpoint")
workflow.add_conditional_edges(
    "resolve_endpoint",
    route_source,
    {"raw": "classify_processing_mode", "metadata": "finalize"},
)
workflow.add_edge("classify_processing_mode", "derive_structures")
workflow.add_edge("derive_structures", "finalize")
workflow.add_edge("finalize", END)

graph_app = workflow.compile()


# --- Entry points ---

def _coerce_source(source) -> Union[RawContent, MetadataOnly]:
    if isinstance(source, (RawContent, MetadataOnly)):
        return source
    if isinstance(source, str):
        return RawContent(text=source)
    return _source_adapter.validate_python(source)


def _failure_result(source, current_mode: ProcessingMode, error: Exception) -> AnalysisResult:
    is_raw = (
        isinstance(source, (RawContent, str))
        or (isinstance(source, dict) and source.get("kind") == "raw")
    )
    return AnalysisResult(
        processing_mode=DEFAULT_PROCESSING_MODE_ON_ERROR if is_raw else current_mode,
        warnings=[f"analysis failed: {error}"],
    )


def analyze(source, current_mode: ProcessingMode = DEFAULT_PROCESSING_MODE) -> AnalysisResult:
    """
    Analyses a WSDL source. Never raises.

    ``current_mode`` is the processing mode the caller already holds; it is
    returned unchanged when only metadata is available.
    """
    try:
        coerced = _coerce_source(source)
        final_state = graph_app.invoke({"source": coerced, "current_mode": current_mode, "warnings": []})
        return final_state["result"]
    except Exception as e:
        logger.exception("WSDL analysis failed")
        return _failure_result(source, current_mode, e)


def analyze_text(text: str, current_mode: ProcessingMode = DEFAULT_PROCESSING_MODE) -> AnalysisResult:
    return analyze(RawContent(text=text), current_mode)
