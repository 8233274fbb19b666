"""
Pydantic model for a registered service record.
"""

import hashlib
import json
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator


# Largest signed 64-bit value; marks a record that has not been given an id yet
INITIAL_IDENTIFIER_VALUE = 2 ** 63 - 1

_ID_MASK = 2 ** 63 - 1


class RegisteredService(BaseModel):
    """A client application allowed to use the authentication broker"""
    id: int = Field(INITIAL_IDENTIFIER_VALUE, description="Numeric id, sentinel when unassigned")
    service_id: str = Field(..., description="Service URL or URL pattern")
    name: str = Field(..., description="Display name")
    description: Optional[str] = None
    theme: Optional[str] = None
    logout_url: Optional[str] = None
    evaluation_order: int = 0
    required_handlers: List[str] = Field(default_factory=list)
    properties: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("service_id")
    @classmethod
    def _service_id_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("service_id must not be blank")
        return value

    def content_hash(self) -> int:
        """
        Derive a numeric id from every field except the id itself.

        The SHA-256 digest keeps the value stable across processes. The result
        is a non-negative 63-bit integer that never equals the sentinel.
        """
        payload = json.dumps(self.model_dump(exclude={"id"}), sort_keys=True, default=str)
        digest = hashlib.sha256(payload.encode("utf-8")).digest()
        value = int.from_bytes(digest[:8], "big") & _ID_MASK
        if value == INITIAL_IDENTIFIER_VALUE:
            value -= 1
        return value

    def has_assigned_id(self) -> bool:
        return self.id != INITIAL_IDENTIFIER_VALUE

    def to_document(self) -> Dict[str, Any]:
        """Map to a MongoDB document keyed by the numeric id."""
        document = self.model_dump(exclude={"id"})
        document["_id"] = self.id
        return document

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "RegisteredService":
        data = dict(document)
        data["id"] = data.pop("_id")
        return cls(**data)

    def __str__(self) -> str:
        return f"RegisteredService(id={self.id}, name={self.name!r}, service_id={self.service_id!r})"
