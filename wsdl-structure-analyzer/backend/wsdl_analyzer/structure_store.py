# wsdl-structure-analyzer/backend/wsdl_analyzer/structure_store.py
"""Client for the structure store that holds uploaded WSDLs.

The store is the source of what ``analyze`` sees: ``fetch_structure`` returns
the raw WSDL (when kept), the derived metadata and the namespace field.
"""
import asyncio
import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

import httpx
from pydantic import ValidationError

from . import config
from .errors import StructureStoreError
from .graph_logic import analyze
from .models import (
    AnalysisResult,
    MetadataOnly,
    ProcessingMode,
    RawContent,
    StructureMetadata,
    StructureRecord,
    WsdlStructureSummary,
)
from .processing_mode import DEFAULT_PROCESSING_MODE

logger = logging.getLogger(__name__)

LIST_LIMIT = 100


class StructureStoreClient:
    def __init__(
        self,
        base_url: str = config.STRUCTURE_STORE_URL,
        timeout: float = config.STRUCTURE_STORE_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        headers: Optional[Mapping[str, str]] = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers=dict(headers or {}),
        )

    async def __aenter__(self) -> "StructureStoreClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get_json(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            raise StructureStoreError(f"GET {path} failed: {e}") from e
        except ValueError as e:
            raise StructureStoreError(f"GET {path} returned invalid JSON: {e}") from e

    async def fetch_structure(self, structure_id: str) -> StructureRecord:
        payload = await self._get_json(f"/structures/{structure_id}")
        try:
            return StructureRecord.model_validate(payload)
        except ValidationError as e:
            raise StructureStoreError(f"structure {structure_id} is malformed: {e}") from e

    async def list_structures(self, business_component_id: Optional[str], usage: str = "target") -> List[WsdlStructureSummary]:
        """WSDL structures selectable for an adapter of the given usage (target/source)."""
        params = {"type": "wsdl", "usage": usage, "limit": LIST_LIMIT}
        if business_component_id:
            params["businessComponentId"] = business_component_id
        payload = await self._get_json("/structures", params=params)
        records = payload.get("structures", []) if isinstance(payload, dict) else []
        return filter_wsdl_structures(records, usage)


def filter_wsdl_structures(records: Iterable[Any], usage: str = "target") -> List[WsdlStructureSummary]:
    """
    Keeps WSDL records usable for ``usage``: the record's own usage, or its
    metadata usage, matches, or no usage is set at all.
    """
    summaries: List[WsdlStructureSummary] = []
    for raw in records:
        try:
            record = raw if isinstance(raw, StructureRecord) else StructureRecord.model_validate(raw)
        except ValidationError as e:
            logger.warning("Skipping malformed structure record: %s", e)
            continue

        is_wsdl = (record.type or "").lower() == "wsdl"
        metadata_usage = record.metadata.usage if record.metadata else None
        matches_usage = record.usage == usage or metadata_usage == usage or not record.usage
        included = is_wsdl and matches_usage and bool(record.id)
        logger.debug(
            "Structure %s: type=%s, usage=%s, metadata.usage=%s, included=%s",
            record.name, record.type, record.usage, metadata_usage, included,
        )
        if included:
            summaries.append(WsdlStructureSummary(
                id=record.id,
                name=record.name or record.id,
                endpoint_url=(record.metadata.endpoint_url if record.metadata else None) or "",
            ))
    return summaries


def source_from_record(record: StructureRecord) -> Union[RawContent, MetadataOnly]:
    if record.original_content and record.original_content.strip():
        return RawContent(text=record.original_content, metadata=record.metadata, namespace=record.namespace)
    logger.warning("Structure %s has no original content, falling back to metadata", record.id)
    return MetadataOnly(metadata=record.metadata or StructureMetadata(), namespace=record.namespace)


async def analyze_structure(
    client: StructureStoreClient,
    structure_id: str,
    current_mode: ProcessingMode = DEFAULT_PROCESSING_MODE,
) -> AnalysisResult:
    """Fetches a structure and analyses it off the event loop."""
    try:
        record = await client.fetch_structure(structure_id)
    except StructureStoreError as e:
        logger.error("Error fetching WSDL details: %s", e)
        return AnalysisResult(processing_mode=ProcessingMode.ASYNCHRONOUS, warnings=[e.as_warning()])
    return await asyncio.to_thread(analyze, source_from_record(record), current_mode)
