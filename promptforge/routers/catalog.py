from fastapi import APIRouter
from ..adapters.registry import all_adapters
from ..platforms import PLATFORMS_BY_ID
from ..presets import PRESET_CATEGORIES

router = APIRouter()


@router.get("/api/platforms")
def list_platforms_endpoint():
    return [
        {**PLATFORMS_BY_ID[a.id.value].model_dump(mode="json", by_alias=True), "supportedAspectRatios": a.supported_aspect_ratios}
        for a in all_adapters()
    ]


@router.get("/api/presets")
def list_presets_endpoint():
    return [c.model_dump(mode="json", by_alias=True, exclude_none=True) for c in PRESET_CATEGORIES]
