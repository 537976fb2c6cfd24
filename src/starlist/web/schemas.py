"""Pydantic request schemas for the web API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Starred restaurants
# ---------------------------------------------------------------------------


class StarCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    restaurant_id: int | str = Field(..., alias="restaurantId")
    comment: str | None = None  # accepted but ignored; new entries start uncommented


class CommentUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    new_comment: str | None = Field(..., alias="newComment")
