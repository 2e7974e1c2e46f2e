"""API request models."""

from typing import Any, Optional

from pydantic import BaseModel, Field

from rendergate.models.documents import DesignIntentTaste, RendererOutputManifest, VisualConstitution


class RendererValidateRequest(BaseModel):
    """Untyped manifest and registry; structure is judged by the contract schemas."""

    manifest: Any = Field(..., description="Renderer output manifest document")
    registry: Any = Field(..., description="Renderer registry document")


class TasteEvaluateRequest(BaseModel):
    """Documents for a taste evaluation. Options default to the configured values."""

    manifest: RendererOutputManifest
    constitution: VisualConstitution
    intent: DesignIntentTaste
    fail_fast: Optional[bool] = None
    verbose: Optional[bool] = None
