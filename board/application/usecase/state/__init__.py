"""State snapshot use cases."""

from .export_state import ExportStateUseCase
from .import_state import ImportStateResponse, ImportStateUseCase

__all__ = [
    "ExportStateUseCase",
    "ImportStateResponse",
    "ImportStateUseCase",
]
