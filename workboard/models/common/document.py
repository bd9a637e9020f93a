from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from workboard.models.common.pyobjectid import PyObjectId


class Document(BaseModel):
    """
    Base model for documents stored in MongoDB.

    `collection_name` names the collection, and `id` maps to the `_id` field.
    """

    collection_name: ClassVar[str]

    id: PyObjectId | None = Field(default=None, alias="_id")

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
        use_enum_values=True,
        validate_default=True,
        from_attributes=True,
    )

    def to_snapshot(self) -> dict:
        """JSON-safe copy of the document used for audit diffs and snapshots."""
        return self.model_dump(mode="json")
