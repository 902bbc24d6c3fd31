import math
from typing import List, Dict, Optional, Any
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

UNSPECIFIED = "unspecified"
DEFAULT_AMBIGUITY = 0.5


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire. Accepts both on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PlatformId(str, Enum):
    MIDJOURNEY = "midjourney"
    STABLE_DIFFUSION = "stable-diffusion"
    RUNWAY = "runway"
    KLING = "kling"
    FIREFLY = "firefly"
    VEO3 = "veo3"
    NANO_BANANA = "nano-banana"
    GROK = "grok"
    GEMINI = "gemini"


class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"
    BOTH = "both"


class PresetCategoryId(str, Enum):
    ASPECT_RATIOS = "aspectRatios"
    LIGHTING = "lighting"
    CAMERAS = "cameras"
    FILM_STOCKS = "filmStocks"
    ATMOSPHERES = "atmospheres"
    ART_STYLES = "artStyles"
    COMPOSITIONS = "compositions"
    COLOR_PALETTES = "colorPalettes"


class Platform(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: PlatformId
    name: str
    type: MediaType
    description: str


class PresetOption(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str = ""
    description: str = ""
    value: Optional[str] = None
    prompt_fragment: Optional[str] = None


class PresetCategory(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: PresetCategoryId
    name: str
    icon: str
    presets: List[PresetOption]

    @model_validator(mode="after")
    def check_payloads(self):
        for option in self.presets:
            if self.id == PresetCategoryId.ASPECT_RATIOS:
                if not isinstance(option.value, str) or not option.value:
                    raise ValueError(f"Aspect ratio preset {option.id} needs a value")
            elif not isinstance(option.prompt_fragment, str) or not option.prompt_fragment:
                raise ValueError(f"Preset {self.id.value}:{option.id} needs a prompt fragment")
        return self


class PresetSelection(CamelModel):
    """Selected option ids per category, plus user-defined options that are not in the catalog."""

    selected: Dict[PresetCategoryId, List[str]] = Field(default_factory=dict)
    custom: Dict[PresetCategoryId, List[PresetOption]] = Field(default_factory=dict)

    @field_validator("selected")
    @classmethod
    def drop_duplicates(cls, v: Dict[PresetCategoryId, List[str]]) -> Dict[PresetCategoryId, List[str]]:
        return {category: list(dict.fromkeys(ids)) for category, ids in v.items()}

    def ids(self, category: PresetCategoryId) -> List[str]:
        return self.selected.get(category, [])

    def applied(self) -> List[str]:
        """Flattened "<category>:<id>" list, whether or not the id resolves to a preset."""
        return [f"{category.value}:{pid}" for category in PresetCategoryId for pid in self.ids(category)]


class PromptAnalysis(CamelModel):
    intent: str = ""
    subject: str = UNSPECIFIED
    style: str = UNSPECIFIED
    mood: str = UNSPECIFIED
    technical_details: List[str] = Field(default_factory=list)
    ambiguity_score: float = DEFAULT_AMBIGUITY

    @field_validator("intent", mode="before")
    @classmethod
    def default_intent(cls, v: Any) -> str:
        return v if isinstance(v, str) else ""

    @field_validator("subject", "style", "mood", mode="before")
    @classmethod
    def default_unspecified(cls, v: Any) -> str:
        return v if isinstance(v, str) else UNSPECIFIED

    @field_validator("technical_details", mode="before")
    @classmethod
    def keep_strings(cls, v: Any) -> List[str]:
        if not isinstance(v, list):
            return []
        return [item for item in v if isinstance(item, str)]

    @field_validator("ambiguity_score", mode="before")
    @classmethod
    def clamp_score(cls, v: Any) -> float:
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            return DEFAULT_AMBIGUITY
        if isinstance(v, float) and math.isnan(v):
            return DEFAULT_AMBIGUITY
        # compare before converting: JSON ints can be too large for float()
        return float(max(0.0, min(1.0, v)))


class RefinementMetadata(CamelModel):
    original_input: str
    presets_applied: List[str]
    refinement_timestamp: str
    model_used: str


class RefinedPrompt(CamelModel):
    platform: PlatformId
    prompt: str
    negative_prompt: Optional[str] = None
    parameters: Dict[str, Any]
    metadata: RefinementMetadata


class RefineRequest(CamelModel):
    # input and platform are checked by the router so that bad values get the
    # {success: false, error} envelope instead of a schema error
    input: Optional[str] = None
    platform: Optional[str] = None
    presets: Dict[str, List[str]] = Field(default_factory=dict)
    custom_presets: Dict[str, List[PresetOption]] = Field(default_factory=dict)
    answers: Dict[str, str] = Field(default_factory=dict)


class RefineResponse(CamelModel):
    success: bool
    questions: Optional[List[str]] = None
    data: Optional[RefinedPrompt] = None
    error: Optional[str] = None
