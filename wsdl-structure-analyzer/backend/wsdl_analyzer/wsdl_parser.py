# wsdl-structure-analyzer/backend/wsdl_analyzer/wsdl_parser.py
import logging
from typing import Dict, Iterable, List, Optional

from .models import Operation
from .xml_document import ADDRESS_NAMESPACES, SOAP_BINDING_NAMESPACES, child_elements, first_child, iter_elements

logger = logging.getLogger(__name__)


def _operation_from_element(op) -> Operation:
    return Operation(
        name=op.get("name"),
        has_input=first_child(op, "input") is not None,
        has_output=first_child(op, "output") is not None,
        has_fault=first_child(op, "fault") is not None,
    )


def _collect_operations(root, container: str) -> List[Operation]:
    operations: List[Operation] = []
    seen = set()
    for parent in iter_elements(root, container):
        for op in child_elements(parent, "operation"):
            op_name = op.get("name")
            if not op_name or op_name in seen:
                continue
            seen.add(op_name)
            operations.append(_operation_from_element(op))
    return operations


def extract_operations(root) -> List[Operation]:
    """
    Lists the operations declared by every portType, in document order.

    A document whose portTypes declare nothing (some generators only emit the
    binding) falls back to the binding's operations.
    """
    operations = _collect_operations(root, "portType")
    if operations:
        logger.debug("Found %d portType operations", len(operations))
        return operations

    operations = _collect_operations(root, "binding")
    if operations:
        logger.info("No portType operations, using %d binding operations", len(operations))
    return operations


def extract_soap_actions(root, names: Iterable[str]) -> Dict[str, str]:
    """Maps operation name -> soapAction of its soap:operation / soap12:operation."""
    wanted = set(names)
    actions: Dict[str, str] = {}
    for binding in iter_elements(root, "binding"):
        for binding_op in child_elements(binding, "operation"):
            op_name = binding_op.get("name")
            if op_name not in wanted or op_name in actions:
                continue
            for soap_op in iter_elements(binding_op, "operation", SOAP_BINDING_NAMESPACES):
                soap_action = soap_op.get("soapAction")
                # An empty soapAction is a legitimate value and is kept.
                if soap_action is not None:
                    actions[op_name] = soap_action
                    break
    return actions


def attach_soap_actions(operations: List[Operation], actions: Dict[str, str]) -> List[Operation]:
    return [
        op.model_copy(update={"soap_action": actions[op.name]}) if op.name in actions else op
        for op in operations
    ]


def find_soap_address(root) -> Optional[str]:
    """Location of the first soap:address / soap12:address / wsdl:address that has one."""
    if root is None:
        return None
    for address in iter_elements(root, "address", ADDRESS_NAMESPACES):
        location = (address.get("location") or "").strip()
        if location:
            return location
    return None


def suggest_structure_name(operations: List[Operation]) -> Optional[str]:
    """Name for a new structure: the operation's name when the WSDL has exactly one."""
    if len(operations) == 1:
        return operations[0].name
    return None
