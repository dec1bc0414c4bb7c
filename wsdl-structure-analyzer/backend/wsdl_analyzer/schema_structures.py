# wsdl-structure-analyzer/backend/wsdl_analyzer/schema_structures.py
"""Request/response/fault structure previews derived from a WSDL's own schema.

A structure is a nested dict of field name -> type name (or nested dict).
Repeating fields carry a ``[]`` suffix, e.g. ``{"items[]": {"sku": "string"}}``.
"""
import logging
from typing import Any, Dict, FrozenSet, Optional

from .models import StructureSet
from .xml_document import (
    XSD_NAMESPACES,
    child_elements,
    first_child,
    is_element,
    iter_elements,
    strip_prefix,
)

logger = logging.getLogger(__name__)

MAX_DEPTH = 32
_PARTICLE_GROUPS = ("sequence", "all", "choice")


class _SchemaIndex:
    """Global schema components and WSDL messages, first declaration wins."""

    def __init__(self, root):
        self.elements: Dict[str, Any] = {}
        self.complex_types: Dict[str, Any] = {}
        self.simple_types: Dict[str, Any] = {}
        self.messages: Dict[str, Any] = {}

        for schema in iter_elements(root, "schema", XSD_NAMESPACES):
            for registry, tag in (
                (self.elements, "element"),
                (self.complex_types, "complexType"),
                (self.simple_types, "simpleType"),
            ):
                for component in child_elements(schema, tag, XSD_NAMESPACES):
                    name = component.get("name")
                    if name and name not in registry:
                        registry[name] = component

        for message in iter_elements(root, "message"):
            name = message.get("name")
            if name and name not in self.messages:
                self.messages[name] = message


def _is_repeating(element) -> bool:
    max_occurs = element.get("maxOccurs")
    if max_occurs == "unbounded":
        return True
    try:
        return max_occurs is not None and int(max_occurs) > 1
    except ValueError:
        return False


def _simple_type_base(simple_type) -> str:
    restriction = first_child(simple_type, "restriction", XSD_NAMESPACES)
    if restriction is not None and restriction.get("base"):
        return strip_prefix(restriction.get("base"))
    return "string"


def _resolve_type(type_name: str, index: _SchemaIndex, seen: FrozenSet[str], depth: int) -> Any:
    name = strip_prefix(type_name)
    if name in index.complex_types:
        if name in seen or depth >= MAX_DEPTH:
            return name
        return _describe_complex_type(index.complex_types[name], index, seen | {name}, depth + 1)
    if name in index.simple_types:
        return _simple_type_base(index.simple_types[name])
    # Built-in XSD types and anything we cannot see keep their local name.
    return name or "string"


def _collect_particles(container, fields: Dict[str, Any], index: _SchemaIndex, seen: FrozenSet[str], depth: int):
    for child in container:
        if is_element(child, "element", XSD_NAMESPACES):
            described = _describe_element(child, index, seen, depth)
            if described is not None:
                fields[described[0]] = described[1]
        elif any(is_element(child, group, XSD_NAMESPACES) for group in _PARTICLE_GROUPS):
            _collect_particles(child, fields, index, seen, depth)


def _describe_complex_type(complex_type, index: _SchemaIndex, seen: FrozenSet[str], depth: int) -> Any:
    fields: Dict[str, Any] = {}

    for content_tag in ("complexContent", "simpleContent"):
        content = first_child(complex_type, content_tag, XSD_NAMESPACES)
        if content is None:
            continue
        derivation = first_child(content, "extension", XSD_NAMESPACES)
        if derivation is None:
            derivation = first_child(content, "restriction", XSD_NAMESPACES)
        if derivation is None:
            return fields
        base = _resolve_type(derivation.get("base", ""), index, seen, depth) if derivation.get("base") else None
        if isinstance(base, dict):
            fields.update(base)
        elif base is not None and content_tag == "simpleContent":
            fields["value"] = base
        _collect_particles(derivation, fields, index, seen, depth)
        return fields

    _collect_particles(complex_type, fields, index, seen, depth)
    return fields


def _describe_element(element, index: _SchemaIndex, seen: FrozenSet[str], depth: int):
    """Returns ``(field_name, structure)`` for an xsd:element, or None when it has no name."""
    ref = element.get("ref")
    name = element.get("name") or strip_prefix(ref)
    if not name:
        return None
    field_name = f"{name}[]" if _is_repeating(element) else name

    if depth >= MAX_DEPTH:
        return field_name, "string"

    inline_complex = first_child(element, "complexType", XSD_NAMESPACES)
    if inline_complex is not None:
        return field_name, _describe_complex_type(inline_complex, index, seen, depth + 1)

    inline_simple = first_child(element, "simpleType", XSD_NAMESPACES)
    if inline_simple is not None:
        return field_name, _simple_type_base(inline_simple)

    if element.get("type"):
        return field_name, _resolve_type(element.get("type"), index, seen, depth)

    if ref:
        key = f"element:{strip_prefix(ref)}"
        target = index.elements.get(strip_prefix(ref))
        if target is None or key in seen:
            return field_name, "string"
        described = _describe_element(target, index, seen | {key}, depth + 1)
        return field_name, described[1] if described else "string"

    return field_name, "string"


def _describe_message(message_name: Optional[str], index: _SchemaIndex) -> Optional[Dict[str, Any]]:
    message = index.messages.get(strip_prefix(message_name))
    if message is None:
        return None

    structure: Dict[str, Any] = {}
    for part in child_elements(message, "part"):
        if part.get("element"):
            element_name = strip_prefix(part.get("element"))
            element = index.elements.get(element_name)
            if element is None:
                continue
            described = _describe_element(element, index, frozenset({f"element:{element_name}"}), 0)
            if described is None:
                continue
            value = described[1]
            structure[element_name] = value if isinstance(value, dict) else {"value": value}
        elif part.get("type") and part.get("name"):
            structure[part.get("name")] = _resolve_type(part.get("type"), index, frozenset(), 0)
    return structure or None


def _find_operation(root, operation_name: Optional[str]):
    for port_type in iter_elements(root, "portType"):
        for op in child_elements(port_type, "operation"):
            if operation_name is None or op.get("name") == operation_name:
                return op
    return None


def extract_structures(root, operation_name: Optional[str] = None) -> StructureSet:
    """Structures of ``operation_name`` (default: the first portType operation)."""
    if root is None:
        return StructureSet()
    operation = _find_operation(root, operation_name)
    if operation is None:
        return StructureSet()

    index = _SchemaIndex(root)

    def message_of(tag: str) -> Optional[Dict[str, Any]]:
        combined: Dict[str, Any] = {}
        for io in child_elements(operation, tag):
            described = _describe_message(io.get("message"), index)
            if described:
                combined.update(described)
        return combined or None

    structures = StructureSet(
        request=message_of("input"),
        response=message_of("output"),
        fault=message_of("fault"),
    )
    logger.debug("Derived structures for operation %s", operation.get("name"))
    return structures
