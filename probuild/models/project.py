"""Project model: a named collection of saved estimations."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from probuild.models.estimate import SavedItem


class Project(BaseModel):
    """A client project and the items estimated for it, newest first."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    name: str
    client: str | None = None
    address: str | None = None
    version: str = "v1.0"
    last_modified: datetime = Field(default_factory=lambda: datetime.now(UTC))
    items: list[SavedItem] = Field(default_factory=list)
