"""Varify: replace hardcoded stylesheet values with custom property references."""

from varify.config import VarifyConfig
from varify.errors import InputMissingError, ParseError, VarifyError, WriteError
from varify.model.result import ProcessResult, Replacement
from varify.pipeline import process, process_file

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "process",
    "process_file",
    "VarifyConfig",
    "ProcessResult",
    "Replacement",
    "VarifyError",
    "InputMissingError",
    "ParseError",
    "WriteError",
]
