# wsdl-structure-analyzer/backend/wsdl_analyzer/suggestions.py
"""Applying an AnalysisResult to a SOAP adapter configuration.

The analyzer never sees what the user typed. This module is the one place that
decides which suggestions may land in the configuration: fields listed in
``edited_fields`` always keep the user's value.
"""
from typing import Any, Dict, Iterable, List, Mapping

from .models import AnalysisResult

SOAP_ACTION = "soapAction"
TARGET_ENDPOINT_URL = "targetEndpointUrl"
PROCESSING_MODE = "processingMode"


def soap_action_options(result: AnalysisResult) -> List[Dict[str, str]]:
    """Entries for the SOAP action selector, one per operation."""
    return [
        {"operationName": op.name, "soapAction": op.soap_action or ""}
        for op in result.operations
    ]


def apply_analysis(
    configuration: Mapping[str, Any],
    result: AnalysisResult,
    edited_fields: Iterable[str] = (),
) -> Dict[str, Any]:
    """Returns a new configuration with the analyzer's suggestions applied."""
    updated = dict(configuration)
    edited = set(edited_fields)

    if SOAP_ACTION not in edited:
        actions = {op.soap_action or "" for op in result.operations}
        if result.single_match:
            updated[SOAP_ACTION] = result.operations[0].soap_action or ""
        elif updated.get(SOAP_ACTION) and updated[SOAP_ACTION] not in actions:
            # Left over from a previously selected WSDL.
            updated[SOAP_ACTION] = ""

    if result.endpoint_url and TARGET_ENDPOINT_URL not in edited:
        updated[TARGET_ENDPOINT_URL] = result.endpoint_url

    if PROCESSING_MODE not in edited:
        updated[PROCESSING_MODE] = result.processing_mode.value

    return updated
