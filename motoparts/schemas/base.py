from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Request body sent to the backend.

    Fields use snake_case in Python and are serialized with their camelCase
    aliases, which is what the backend expects.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")
