# wsdl-structure-analyzer/backend/wsdl_analyzer/xml_document.py
"""Namespace-aware parsing of WSDL text.

Everything downstream matches elements on ``(namespace URI, local name)``;
prefixes such as ``wsdl:`` or ``soap12:`` are chosen by the document author and
are never compared as strings.
"""
import logging
import re
from typing import Iterable, Iterator, List, Optional

from lxml import etree
from pydantic import BaseModel, ConfigDict

from .errors import ParseError

logger = logging.getLogger(__name__)

WSDL_NS = "http://schemas.xmlsoap.org/wsdl/"
SOAP11_NS = "http://schemas.xmlsoap.org/wsdl/soap/"
SOAP12_NS = "http://schemas.xmlsoap.org/wsdl/soap12/"
XSD_NS = "http://www.w3.org/2001/XMLSchema"

# ``None`` inside a namespace tuple stands for an unqualified element.
WSDL_NAMESPACES = (WSDL_NS, None)
SOAP_BINDING_NAMESPACES = (SOAP11_NS, SOAP12_NS)
ADDRESS_NAMESPACES = (SOAP11_NS, SOAP12_NS, WSDL_NS, None)
XSD_NAMESPACES = (XSD_NS,)

_ENCODING_DECLARATION = re.compile(r"^(<\?xml[^>]*?)\s+encoding\s*=\s*([\"'])[^\"']*\2")


class ParseResult(BaseModel):
    """Either a parsed root element or the reason parsing failed."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    root: Optional[etree._Element] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.root is not None


def _build_parser() -> etree.XMLParser:
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
        huge_tree=False,
        recover=False,
    )


def parse_document(text: Optional[str], max_length: Optional[int] = None) -> ParseResult:
    """Parses WSDL text. Never raises; failures come back as ``ParseResult.error``."""
    if text is None or not text.strip():
        return ParseResult(error=ParseError("document is empty"))
    if max_length is not None and len(text) > max_length:
        return ParseResult(error=ParseError(f"document is {len(text)} characters, limit is {max_length}"))

    # The text is already decoded, so an encoding pseudo-attribute would only
    # make lxml reject the str input.
    cleaned = _ENCODING_DECLARATION.sub(r"\1", text.lstrip("\ufeff").lstrip(), count=1)
    try:
        root = etree.fromstring(cleaned, parser=_build_parser())
    except Exception as e:
        logger.warning("Failed to parse WSDL document: %s", e)
        return ParseResult(error=ParseError(str(e) or type(e).__name__))

    if root is None:
        return ParseResult(error=ParseError("document has no root element"))
    logger.debug("Parsed WSDL root {%s}%s", namespace_of(root), local_name(root))
    return ParseResult(root=root)


# --- Element helpers ---

def local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def namespace_of(element: etree._Element) -> Optional[str]:
    return etree.QName(element).namespace


def is_element(element, name: str, namespaces: Optional[Iterable[Optional[str]]] = WSDL_NAMESPACES) -> bool:
    """True for an element called ``name`` in one of ``namespaces`` (``None`` means any)."""
    if not isinstance(element.tag, str):
        return False
    if local_name(element) != name:
        return False
    return namespaces is None or namespace_of(element) in tuple(namespaces)


def child_elements(parent, name: str, namespaces: Optional[Iterable[Optional[str]]] = WSDL_NAMESPACES) -> List[etree._Element]:
    namespaces = None if namespaces is None else tuple(namespaces)
    return [child for child in parent if is_element(child, name, namespaces)]


def first_child(parent, name: str, namespaces: Optional[Iterable[Optional[str]]] = WSDL_NAMESPACES) -> Optional[etree._Element]:
    children = child_elements(parent, name, namespaces)
    return children[0] if children else None


def iter_elements(root, name: str, namespaces: Optional[Iterable[Optional[str]]] = WSDL_NAMESPACES) -> Iterator[etree._Element]:
    """Descendants (and ``root`` itself) matching ``name``, in document order."""
    namespaces = None if namespaces is None else tuple(namespaces)
    for element in root.iter(etree.Element):
        if is_element(element, name, namespaces):
            yield element


def strip_prefix(qualified_name: Optional[str]) -> str:
    """``tns:GetOrderRequest`` -> ``GetOrderRequest``."""
    if not qualified_name:
        return ""
    return qualified_name.split(":")[-1]
