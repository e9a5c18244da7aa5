# region Docstring
"""
cliptails.models.workspace_state
Persistence and domain models for keyed workspace state.
Overview:
- Provides a SQLAlchemy entity holding one JSON document per fixed state key
    (e.g. "tails.history").
- Provides a Pydantic model mirroring the entity for safe I/O.
Contents:
- SQLAlchemy entities:
    - WorkspaceStateEntity:
        Key (primary), JSON-encoded value and an update timestamp. The .model
        property converts to a WorkspaceState.
- Pydantic models:
    - WorkspaceState:
        Key, decoded value and update timestamp.
"""
# endregion
# region Imports
import json
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from cliptails.database import Base


# endregion
# region SQLAlchemy Model
class WorkspaceStateEntity(Base):
    """
    Model representing one persisted state value.
    Attributes:
        key (str): Fixed state identifier.
        value (str): JSON-encoded value.
        updated_at (datetime): Timestamp of the last save.
    """

    __tablename__ = "workspace_state"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<WorkspaceState(key='{self.key}', updated_at={self.updated_at})>"

    @property
    def model(self) -> "WorkspaceState":
        return WorkspaceState(
            key=self.key,
            value=json.loads(self.value),
            updated_at=self.updated_at,
        )


# endregion
# region Pydantic Model
class WorkspaceState(BaseModel):
    key: str = Field(..., description="Fixed state identifier")
    value: Any = Field(None, description="Decoded state value")
    updated_at: Optional[datetime] = Field(
        None, description="Timestamp of the last save"
    )

    model_config = ConfigDict(from_attributes=True)


# endregion

__all__ = ["WorkspaceStateEntity", "WorkspaceState"]
