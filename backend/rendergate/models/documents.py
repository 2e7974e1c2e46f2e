"""Typed views of the JSON documents the gates read.

The renderer manifest and registry reach these models only after passing
their JSON Schemas. Constitution, design intent and ruleset documents are
parsed straight into them by the file adapter.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr

# Declared values are taken exactly as written: "8" is not 8 and true is not 1.
Number = Union[StrictInt, StrictFloat]
ConsistencyValue = Union[StrictInt, StrictFloat, StrictStr]


# ─── Renderer output manifest ───


class RendererContract(BaseModel):
    id: str
    version: str


class RendererReference(BaseModel):
    id: str
    version: str
    checksum: Optional[str] = None


class RendererImmutableReference(BaseModel):
    id: str
    version: str
    checksum: str


class RendererMetadata(BaseModel):
    name: str
    version: str
    target: str
    declares_contract: str


class ManifestInputs(BaseModel):
    design_intent: RendererImmutableReference
    visual_constitution: RendererReference
    pattern_registries: Optional[list[RendererReference]] = None


class RendererArtifact(BaseModel):
    format: str
    uri: str
    checksum: Optional[str] = None


class TokenUsage(BaseModel):
    declared: list[str] = Field(default_factory=list)
    undeclared: list[str] = Field(default_factory=list)


class PatternUsageDeclaration(BaseModel):
    declared: list[str] = Field(default_factory=list)


class ConstitutionReport(BaseModel):
    violations: list[str] = Field(default_factory=list)


class Determinism(BaseModel):
    deterministic: bool
    markers: list[str] = Field(default_factory=list)


class ManifestOutputs(BaseModel):
    artifact: RendererArtifact
    token_usage: TokenUsage
    pattern_usage: PatternUsageDeclaration
    constitution: ConstitutionReport
    determinism: Determinism


class TypographyRole(BaseModel):
    role: str
    size: Number


class TasteTypography(BaseModel):
    roles: list[TypographyRole] = Field(default_factory=list)


class TasteSpacing(BaseModel):
    values: list[Number] = Field(default_factory=list)


class ContrastPair(BaseModel):
    pair: str
    ratio: Number


class TasteColor(BaseModel):
    tokens: list[str] = Field(default_factory=list)
    contrast: list[ContrastPair] = Field(default_factory=list)


class TasteDensity(BaseModel):
    interactions_per_view: StrictInt


class TasteConsistency(BaseModel):
    radius: list[Number] = Field(default_factory=list)
    elevation: list[Number] = Field(default_factory=list)
    motion: list[str] = Field(default_factory=list)


class PatternUsage(BaseModel):
    pattern: str
    intent: str


class TastePatterns(BaseModel):
    usage: list[PatternUsage] = Field(default_factory=list)


class RendererTaste(BaseModel):
    typography: TasteTypography
    spacing: TasteSpacing
    color: TasteColor
    density: TasteDensity
    consistency: TasteConsistency
    patterns: TastePatterns


class RendererOutputManifest(BaseModel):
    """One renderer's declared build result."""

    contract: RendererContract
    renderer: RendererMetadata
    inputs: ManifestInputs
    outputs: ManifestOutputs
    taste: RendererTaste
    generated_at: Optional[str] = None
    notes: Optional[list[str]] = None


# ─── Renderer registry ───


class RendererRegistryEntry(BaseModel):
    name: str
    version: str
    target: str
    contract_id: str


class RendererRegistry(BaseModel):
    registry_version: str
    renderers: list[RendererRegistryEntry] = Field(default_factory=list)

    def find(self, name: str, version: str, target: str) -> Optional[RendererRegistryEntry]:
        """First entry registered for this exact (name, version, target)."""
        for entry in self.renderers:
            if entry.name == name and entry.version == version and entry.target == target:
                return entry
        return None


# ─── Visual constitution ───


class TypographyRoleRange(BaseModel):
    name: str
    min: Number
    max: Number


class TypographyConstitution(BaseModel):
    max_font_sizes: StrictInt
    roles: list[TypographyRoleRange] = Field(default_factory=list)
    hierarchy: list[str] = Field(default_factory=list, description="Role names, largest to smallest")

    def role(self, name: str) -> Optional[TypographyRoleRange]:
        for entry in self.roles:
            if entry.name == name:
                return entry
        return None


class SpacingConstitution(BaseModel):
    allowed_values: list[Number] = Field(default_factory=list)
    max_variance: Number


class ColorConstitution(BaseModel):
    allowed_tokens: list[str] = Field(default_factory=list)
    contrast_floor: Number


class DensityConstitution(BaseModel):
    max_interactions_per_view: StrictInt


class ConsistencyBand(BaseModel):
    allowed_values: list[ConsistencyValue] = Field(default_factory=list)
    max_variance: Optional[Number] = None


class ConsistencyConstitution(BaseModel):
    radius: ConsistencyBand
    elevation: ConsistencyBand
    motion: ConsistencyBand


class PatternsConstitution(BaseModel):
    allowed: list[str] = Field(default_factory=list)
    intents: Optional[dict[str, list[str]]] = None


class VisualConstitution(BaseModel):
    """Versioned governance document for a design system."""

    id: str
    version: str
    typography: TypographyConstitution
    spacing: SpacingConstitution
    color: ColorConstitution
    density: DensityConstitution
    consistency: ConsistencyConstitution
    patterns: Optional[PatternsConstitution] = None


# ─── Design intent ───


class IntentDensity(BaseModel):
    max_interactions_per_view: Optional[StrictInt] = None


class DesignIntentTaste(BaseModel):
    """Per-project overrides that take precedence over the constitution."""

    id: str
    version: str
    density: Optional[IntentDensity] = None
    allowed_patterns: Optional[dict[str, list[str]]] = None

    @property
    def density_limit(self) -> Optional[int]:
        if self.density is None:
            return None
        return self.density.max_interactions_per_view
