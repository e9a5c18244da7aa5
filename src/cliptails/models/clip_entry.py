# region Docstring
"""
cliptails.models.clip_entry
Domain model for a single retained clip.
Overview:
- Provides the Pydantic model stored by the history store and persisted as JSON
    through the state storage layer.
Contents:
- ClipEntry:
    One normalized clip: capture timestamp (epoch ms, identity key), language of
    the source document, the dedented line sequence, the source file display name
    and the keywords indexed from the raw text.
Design notes:
- Entries are frozen; the store replaces, never edits, them.
- `joined` is the canonical content key used for per-language deduplication, so it
    always joins with "\\n" regardless of the document's end-of-line string.
"""
# endregion
# region Imports
from typing import List

from pydantic import BaseModel, ConfigDict, Field


# endregion
# region Pydantic Model
class ClipEntry(BaseModel):
    created_at: int = Field(
        ..., ge=1, description="Capture timestamp in epoch milliseconds"
    )
    language_id: str = Field(
        ..., description="Language identifier of the source document"
    )
    lines: List[str] = Field(
        ..., min_length=1, description="Normalized clip body, one item per line"
    )
    source_file: str = Field("", description="Display name of the originating file")
    line_number: int = Field(
        0, ge=0, description="Zero-based line of the selection the clip was taken from"
    )
    keywords: List[str] = Field(
        default_factory=list, description="Autocomplete keywords from the raw text"
    )

    model_config = ConfigDict(
        frozen=True,
        from_attributes=True,
        json_schema_extra={
            "examples": [
                {
                    "created_at": 1735732800000,
                    "language_id": "python",
                    "lines": ["for item in items:", "    print(item)"],
                    "source_file": "main.py",
                    "line_number": 0,
                    "keywords": ["item", "items", "print"],
                }
            ]
        },
    )

    @property
    def joined(self) -> str:
        """Lines joined by a canonical newline."""
        return "\n".join(self.lines)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def same_content(self, language_id: str, joined: str) -> bool:
        return self.language_id == language_id and self.joined == joined


# endregion

__all__ = ["ClipEntry"]
