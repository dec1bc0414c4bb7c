# wsdl-structure-analyzer/backend/wsdl_analyzer/main.py
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from fastapi import Depends, FastAPI, File, Form, HTTPException, Query, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware

from . import config
from .errors import StructureStoreError
from .graph_logic import analyze
from .logging_utils import setup_logging
from .models import (
    AnalysisResult,
    HealthResponse,
    ProcessingMode,
    RawContent,
    StructureAnalysisRequest,
    SuggestionRequest,
    SuggestionResponse,
    WsdlStructureSummary,
)
from .processing_mode import DEFAULT_PROCESSING_MODE
from .structure_store import StructureStoreClient, analyze_structure, source_from_record
from .suggestions import apply_analysis, soap_action_options


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    yield


app = FastAPI(title="WSDL Structure Analyzer API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


async def get_structure_store() -> AsyncIterator[StructureStoreClient]:
    async with StructureStoreClient() as client:
        yield client


def _check_length(text: str) -> None:
    if len(text) > config.WSDL_MAX_DOCUMENT_LENGTH:
        raise HTTPException(
            status_code=413,
            detail=f"WSDL is {len(text)} characters, limit is {config.WSDL_MAX_DOCUMENT_LENGTH}.",
        )


@app.get("/api/health", response_model=HealthResponse)
def health_check():
    return {"status": "ok"}


@app.post("/api/analyses", response_model=AnalysisResult)
async def analyze_upload(
    wsdl_file: UploadFile = File(...),
    processing_mode: ProcessingMode = Form(DEFAULT_PROCESSING_MODE),
):
    """
    Analyses an uploaded WSDL file.
    Returns operations, SOAP actions, endpoint, processing mode and structures.
    """
    raw = await wsdl_file.read()
    try:
        wsdl_content = raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise HTTPException(status_code=400, detail=f"WSDL file is not UTF-8: {e}")
    _check_length(wsdl_content)
    return await run_in_threadpool(analyze, RawContent(text=wsdl_content), processing_mode)


@app.post("/api/analyses/structure", response_model=AnalysisResult)
async def analyze_structure_record(request: StructureAnalysisRequest):
    """Analyses a structure record (raw WSDL and/or stored metadata) sent by the UI."""
    if request.original_content:
        _check_length(request.original_content)
    return await run_in_threadpool(analyze, source_from_record(request), request.processing_mode)


@app.get("/api/structures", response_model=List[WsdlStructureSummary])
async def list_wsdl_structures(
    business_component_id: Optional[str] = Query(None, alias="businessComponentId"),
    usage: str = Query("target"),
    store: StructureStoreClient = Depends(get_structure_store),
):
    try:
        return await store.list_structures(business_component_id, usage)
    except StructureStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))


@app.get("/api/structures/{structure_id}/analysis", response_model=AnalysisResult)
async def analyze_stored_structure(
    structure_id: str,
    processing_mode: ProcessingMode = Query(DEFAULT_PROCESSING_MODE, alias="processingMode"),
    store: StructureStoreClient = Depends(get_structure_store),
):
    return await analyze_structure(store, structure_id, processing_mode)


@app.post("/api/suggestions", response_model=SuggestionResponse)
def suggest_configuration(request: SuggestionRequest):
    """Applies an analysis to an adapter configuration, keeping fields the user edited."""
    return SuggestionResponse(
        configuration=apply_analysis(request.configuration, request.analysis, request.edited_fields),
        soap_action_options=soap_action_options(request.analysis),
    )
