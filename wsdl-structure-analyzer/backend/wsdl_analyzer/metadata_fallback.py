# wsdl-structure-analyzer/backend/wsdl_analyzer/metadata_fallback.py
import logging
from typing import List, Optional, Tuple

from .models import StructureMetadata, StructureSet

logger = logging.getLogger(__name__)


def structures_from_metadata(metadata: Optional[StructureMetadata]) -> Tuple[StructureSet, List[str]]:
    """
    Structure previews stored alongside a WSDL record.

    The hasInput/hasOutput/hasFault flags are reported as a warning only; they
    never decide the processing mode. Values dropped as mistyped are reported too.
    """
    if metadata is None:
        return StructureSet(), []

    structures = StructureSet(
        request=metadata.request_structure,
        response=metadata.response_structure,
        fault=metadata.fault_structure,
    )
    logger.debug("Structures from metadata: %s", structures.model_dump(exclude_none=True))

    warnings: List[str] = metadata.ignored_values
    for ignored in warnings:
        logger.warning(ignored)
    if metadata.has_input is not None or metadata.has_output is not None or metadata.has_fault is not None:
        flags = (
            f"Metadata operation flags: hasInput={metadata.has_input}, "
            f"hasOutput={metadata.has_output}, hasFault={metadata.has_fault}"
        )
        logger.info(flags)
        warnings.append(flags)
    return structures, warnings
