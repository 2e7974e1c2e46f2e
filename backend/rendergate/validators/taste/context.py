"""Evaluation context shared by the taste rules."""

from pydantic import BaseModel

from rendergate.models.documents import (
    DesignIntentTaste,
    RendererOutputManifest,
    RendererTaste,
    VisualConstitution,
)


class TasteContext(BaseModel):
    """Manifest, constitution and design intent for one taste evaluation."""

    manifest: RendererOutputManifest
    constitution: VisualConstitution
    intent: DesignIntentTaste

    model_config = {"frozen": True}

    @property
    def taste(self) -> RendererTaste:
        return self.manifest.taste
