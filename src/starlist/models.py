"""Pydantic models for domain objects and configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


# --- Domain Models ---


class Restaurant(BaseModel):
    """A catalog entry. Extra catalog attributes are kept as-is."""

    model_config = ConfigDict(extra="allow")

    id: int | str
    name: str


class StarredEntry(BaseModel):
    """A user's bookmark of one restaurant."""

    id: str
    restaurant_id: str
    comment: str | None = None


# --- Config Models ---


class SupabaseSettings(BaseModel):
    url: str = ""
    key: str = ""
    starred_table: str = "starred_restaurants"
    restaurants_table: str = "restaurants"
    restaurant_columns: str = "id, name"


class AppConfig(BaseModel):
    """Loaded from YAML config file."""

    backend: Literal["memory", "supabase"] = "memory"
    supabase: SupabaseSettings = Field(default_factory=SupabaseSettings)
    restaurants: list[Restaurant] = []  # seed catalog for the memory backend
