# wsdl-structure-analyzer/backend/wsdl_analyzer/config.py
import os

# --- Analyzer limits ---
# Upper bound on WSDL text handed to the parser, in characters.
WSDL_MAX_DOCUMENT_LENGTH = int(os.getenv("WSDL_MAX_DOCUMENT_LENGTH", str(5 * 1024 * 1024)))

# --- Structure store ---
STRUCTURE_STORE_URL = os.getenv("STRUCTURE_STORE_URL", "http://localhost:8080/api")
STRUCTURE_STORE_TIMEOUT = float(os.getenv("STRUCTURE_STORE_TIMEOUT", "10"))

# --- API ---
CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:5173,http://localhost").split(",")
    if origin.strip()
]

# --- Logging ---
LOG_LEVEL = os.getenv("WSDL_ANALYZER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("WSDL_ANALYZER_LOG_FORMAT", "%(asctime)s %(levelname)s %(name)s %(message)s")
