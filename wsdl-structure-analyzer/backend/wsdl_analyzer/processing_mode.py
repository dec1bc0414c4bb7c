# wsdl-structure-analyzer/backend/wsdl_analyzer/processing_mode.py
import logging
from typing import Iterable

from .models import Operation, ProcessingMode

logger = logging.getLogger(__name__)

# Used when the WSDL cannot be parsed: most SOAP services are request/response.
DEFAULT_PROCESSING_MODE_ON_ERROR = ProcessingMode.SYNCHRONOUS

# What an adapter configuration holds before any WSDL has been analysed.
DEFAULT_PROCESSING_MODE = ProcessingMode.ASYNCHRONOUS


def has_synchronous_operations(operations: Iterable[Operation]) -> bool:
    return any(op.has_input and op.has_output for op in operations)


def classify_processing_mode(operations: Iterable[Operation], parse_failed: bool = False) -> ProcessingMode:
    """SYNCHRONOUS when any operation is request/response, ASYNCHRONOUS for one-way only."""
    if parse_failed:
        logger.info("WSDL could not be parsed, defaulting to %s", DEFAULT_PROCESSING_MODE_ON_ERROR.value)
        return DEFAULT_PROCESSING_MODE_ON_ERROR
    if has_synchronous_operations(operations):
        logger.info("WSDL has request/response operations, setting %s", ProcessingMode.SYNCHRONOUS.value)
        return ProcessingMode.SYNCHRONOUS
    logger.info("WSDL has one-way operations only, setting %s", ProcessingMode.ASYNCHRONOUS.value)
    return ProcessingMode.ASYNCHRONOUS
