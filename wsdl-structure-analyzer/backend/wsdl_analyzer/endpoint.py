# wsdl-structure-analyzer/backend/wsdl_analyzer/endpoint.py
"""Target endpoint resolution.

The resolver only suggests a URL. Whether the suggestion may replace what is
already in the adapter configuration is decided by the caller, see
``suggestions.apply_analysis``.
"""
import logging
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel

from .errors import AmbiguousNamespace
from .models import NamespaceField, NamespaceInfo, StructureMetadata
from .namespaces import parse_namespace_string
from .wsdl_parser import find_soap_address

logger = logging.getLogger(__name__)


class EndpointSource(str, Enum):
    METADATA = "metadata"
    NAMESPACE = "namespace"
    NAMESPACE_JSON = "namespace_json"
    SOAP_ADDRESS = "soap_address"


class EndpointResolution(BaseModel):
    url: Optional[str] = None
    source: Optional[EndpointSource] = None


def _non_empty(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _structured_schema_location(namespace: Optional[NamespaceField]) -> Optional[str]:
    if isinstance(namespace, NamespaceInfo):
        return _non_empty(namespace.schema_location)
    if isinstance(namespace, dict):
        return _non_empty(namespace.get("schemaLocation", namespace.get("schema_location")))
    return None


def _json_schema_location(namespace: Optional[NamespaceField]) -> Optional[str]:
    if not isinstance(namespace, str) or not namespace.strip():
        return None
    try:
        parsed = parse_namespace_string(namespace)
    except AmbiguousNamespace as e:
        logger.debug("Namespace string is not usable for the endpoint: %s", e)
        return None
    return _non_empty(parsed.get("schemaLocation"))


def resolve_endpoint(
    metadata: Optional[StructureMetadata] = None,
    namespace: Optional[NamespaceField] = None,
    root=None,
) -> EndpointResolution:
    """
    First non-empty candidate wins:

    1. ``metadata.endpoint_url``
    2. ``namespace.schemaLocation`` of a structured namespace
    3. ``schemaLocation`` of a JSON-encoded namespace string
    4. the document's first SOAP address (only when ``root`` is given)
    """
    candidates = (
        (EndpointSource.METADATA, lambda: _non_empty(metadata.endpoint_url) if metadata else None),
        (EndpointSource.NAMESPACE, lambda: _structured_schema_location(namespace)),
        (EndpointSource.NAMESPACE_JSON, lambda: _json_schema_location(namespace)),
        (EndpointSource.SOAP_ADDRESS, lambda: find_soap_address(root)),
    )
    for source, candidate in candidates:
        url = candidate()
        if url:
            logger.info("Using endpoint URL from %s: %s", source.value, url)
            return EndpointResolution(url=url, source=source)
    return EndpointResolution()
