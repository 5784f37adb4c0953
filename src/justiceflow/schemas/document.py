from pydantic import AliasChoices, Field, model_validator
from typing import Optional

from .base import RecordModel


class Document(RecordModel):
    """Evidence item or medical attachment.

    ``data`` holds an inline data URL and may be missing when the upload
    failed; that is not treated as corruption. Older evidence lists stored a
    bare filename string, which is read as a document without content.
    """

    name: str = ""
    type: str = "unknown"
    date: Optional[str] = None
    data: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("data", "fileData"),
        serialization_alias="data",
    )

    @model_validator(mode="before")
    @classmethod
    def _from_filename(cls, value):
        if isinstance(value, str):
            return {"name": value, "type": "unknown"}
        return value

    @property
    def has_content(self) -> bool:
        return bool(self.data)

    @property
    def size_bytes(self) -> int:
        """Approximate decoded size of the inline content."""
        if not self.data:
            return 0
        payload = self.data.split(",", 1)[1] if self.data.startswith("data:") else self.data
        padding = payload.count("=", max(len(payload) - 2, 0))
        return max(len(payload) * 3 // 4 - padding, 0)
