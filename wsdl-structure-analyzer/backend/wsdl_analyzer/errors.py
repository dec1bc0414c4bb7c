# wsdl-structure-analyzer/backend/wsdl_analyzer/errors.py
"""Failure taxonomy of the analyzer.

None of these ever escape ``analyze``: the orchestrator downgrades each one to
an entry in ``AnalysisResult.warnings`` and applies the step's default.
"""


class WsdlAnalysisError(Exception):
    """Base class for every analysis failure."""

    def as_warning(self) -> str:
        return f"{type(self).__name__}: {self}"


class ParseError(WsdlAnalysisError):
    """The WSDL text is not well-formed XML (or is empty / too large)."""


class NoOperationsFound(WsdlAnalysisError):
    """Neither portType nor binding declares a named operation."""


class NoSoapAddressFound(WsdlAnalysisError):
    """No endpoint could be resolved from metadata, namespace or soap:address."""


class AmbiguousNamespace(WsdlAnalysisError):
    """An opaque namespace string could not be read as a JSON object."""


class StructureStoreError(WsdlAnalysisError):
    """The structure store could not be reached or returned garbage."""
