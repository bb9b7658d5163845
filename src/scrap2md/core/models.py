"""
Purpose: Scrap and comment models deserialized from the blob.json payload.
Constraints: Data containers only; no logic.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Comment(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    author: str
    created_at: str
    body: str = Field(alias="body_markdown")
    children: List["Comment"] = Field(default_factory=list)


class Scrap(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str
    comments: List[Comment]


Comment.model_rebuild()
