"""Script, generator-response and history data models.

All models are frozen: a record produced by the generator (or reloaded from
history) is never written into.  Filtering and id assignment build new
instances with model_copy().  extra="ignore" gives forward-compatibility with
generator replies that carry fields we do not model yet.

Python attributes are snake_case; JSON uses the camelCase aliases the
generator and the history file were written with (postContent, productLink).
Either name is accepted on input.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

_MODEL_CONFIG = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


# ── Script models ─────────────────────────────────────────────────────────────


class ScriptScene(BaseModel):
    """One scene of a short video: what is on screen and what is said."""

    model_config = _MODEL_CONFIG

    visual: str
    voiceover: str


class GeneratedScript(BaseModel):
    """A script exactly as the generator returns it (no id yet)."""

    model_config = _MODEL_CONFIG

    title: str
    hook: str
    scenes: List[ScriptScene]
    cta: str
    post_content: Optional[str] = Field(default=None, alias="postContent")
    hashtags: Optional[List[str]] = None


class Script(BaseModel):
    """A generated short-video script with a stable id.

    id is assigned once at ingestion and never reused.  saved belongs to the
    surrounding application; nothing in this package changes it.
    """

    model_config = _MODEL_CONFIG

    id: str
    title: str
    hook: str
    scenes: List[ScriptScene]
    cta: str
    post_content: Optional[str] = Field(default=None, alias="postContent")
    hashtags: Optional[List[str]] = None
    saved: Optional[bool] = None


class GeneratorResponse(BaseModel):
    """Structured generator reply: {"scripts": [...]}."""

    model_config = _MODEL_CONFIG

    scripts: List[GeneratedScript]


# ── History ───────────────────────────────────────────────────────────────────


class HistoryItem(BaseModel):
    """One past generation run: the product link and the scripts it produced."""

    model_config = _MODEL_CONFIG

    id: str
    timestamp: int  # ms since epoch
    product_link: str = Field(alias="productLink")
    scripts: List[Script]
