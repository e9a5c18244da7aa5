"""
cliptails.models
Centralized imports for the package's Pydantic models and SQLAlchemy entities.
"""

from .clip_entry import ClipEntry  # noqa: F401
from .workspace_state import WorkspaceState, WorkspaceStateEntity  # noqa: F401

entities = ["WorkspaceStateEntity"]
"""
Entity classes for database persistence.
"""

models = ["ClipEntry", "WorkspaceState"]
"""
Pydantic model classes for application logic and I/O.
"""

__all__ = entities + models
