"""
Workflow layer for starterkit.
High-level operations that orchestrate multiple services.
"""

from starterkit.db import Session
from starterkit.services import (
    card_catalog_service,
    deck_service,
    session_service,
    user_card_service,
    user_service,
)
from starterkit.workflows.session_cleanup import SessionCleanupService
from starterkit.workflows.starter_content import (
    StarterContentWorkflow,
    StarterGrantResult,
)

# Create workflow instances
starter_workflow = StarterContentWorkflow(
    Session,
    catalog_service=card_catalog_service,
    user_card_service=user_card_service,
    deck_service=deck_service,
    user_service=user_service,
)
session_cleanup_service = SessionCleanupService(session_service)

__all__ = [
    "starter_workflow",
    "session_cleanup_service",
    "StarterContentWorkflow",
    "StarterGrantResult",
    "SessionCleanupService",
]
