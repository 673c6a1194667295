"""Core business logic services."""

from .clash_service import ClashService, estimate_intersection
from .contact_service import ContactService, accumulate_contacts
from .analysis_service import InteractionAnalysisService

__all__ = [
    "ClashService",
    "estimate_intersection",
    "ContactService",
    "accumulate_contacts",
    "InteractionAnalysisService",
]
