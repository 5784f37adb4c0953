from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class RecordModel(BaseModel):
    """Base for persisted records: camelCase on the wire, snake_case in Python."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    def to_record(self) -> dict:
        """Serialize to the persisted JSON layout."""
        return self.model_dump(by_alias=True, mode="json")
