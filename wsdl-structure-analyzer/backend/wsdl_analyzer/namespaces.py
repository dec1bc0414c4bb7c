# wsdl-structure-analyzer/backend/wsdl_analyzer/namespaces.py
import json
import logging
from typing import Any, List, Optional, Tuple

from .errors import AmbiguousNamespace
from .models import NamespaceField, NamespaceInfo
from .wsdl_parser import find_soap_address

logger = logging.getLogger(__name__)


def parse_namespace_string(value: str) -> dict:
    """Reads an opaque namespace string as a JSON object, or raises AmbiguousNamespace."""
    try:
        parsed = json.loads(value)
    except (TypeError, ValueError) as e:
        raise AmbiguousNamespace(f"namespace is not JSON: {e}") from e
    if not isinstance(parsed, dict):
        raise AmbiguousNamespace(f"namespace JSON is a {type(parsed).__name__}, not an object")
    return parsed


def _field(namespace: Any, attribute: str, key: str) -> Any:
    if isinstance(namespace, NamespaceInfo):
        return getattr(namespace, attribute)
    if isinstance(namespace, dict):
        return namespace.get(key, namespace.get(attribute))
    return None


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _external_info(namespace: Optional[NamespaceField]) -> Tuple[Optional[NamespaceInfo], List[str]]:
    if namespace is None or (isinstance(namespace, str) and not namespace.strip()):
        return None, []

    if isinstance(namespace, str):
        try:
            namespace = parse_namespace_string(namespace)
        except AmbiguousNamespace as e:
            logger.info("Could not parse namespace: %s", e)
            return None, [e.as_warning()]

    schema_location = _field(namespace, "schema_location", "schemaLocation")
    info = NamespaceInfo(
        uri=_as_str(_field(namespace, "uri", "uri")),
        prefix=_as_str(_field(namespace, "prefix", "prefix")),
        target_namespace=_as_str(_field(namespace, "target_namespace", "targetNamespace")),
        schema_location=schema_location if isinstance(schema_location, str) and schema_location else None,
    )
    return info, []


def _document_info(root) -> Optional[NamespaceInfo]:
    if root is None:
        return None
    target_namespace = root.get("targetNamespace") or ""
    if not target_namespace:
        return None

    prefix = ""
    for declared_prefix, uri in root.nsmap.items():
        if declared_prefix and uri == target_namespace:
            prefix = declared_prefix
            break
    return NamespaceInfo(
        uri=target_namespace,
        prefix=prefix,
        target_namespace=target_namespace,
        schema_location=find_soap_address(root),
    )


def resolve_namespace(root, namespace: Optional[NamespaceField] = None) -> Tuple[Optional[NamespaceInfo], List[str]]:
    """
    Combines the externally stored namespace field with what the definitions
    element declares. The document wins for uri/prefix/targetNamespace. The
    external schemaLocation wins over the document's first SOAP address.
    """
    external, warnings = _external_info(namespace)
    document = _document_info(root)

    if document is None:
        return external, warnings
    if external is None:
        return document, warnings

    return NamespaceInfo(
        uri=document.uri or external.uri,
        prefix=document.prefix or external.prefix,
        target_namespace=document.target_namespace or external.target_namespace,
        schema_location=external.schema_location or document.schema_location,
    ), warnings
