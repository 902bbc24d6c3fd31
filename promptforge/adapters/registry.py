from typing import Dict, List, Union
from ..errors import UnknownPlatform
from ..models import PlatformId
from .base import PlatformAdapter
from .image import MIDJOURNEY, STABLE_DIFFUSION, FIREFLY, NANO_BANANA, GROK, GEMINI
from .video import RUNWAY, KLING, VEO3

ADAPTERS: Dict[PlatformId, PlatformAdapter] = {
    a.id: a for a in [MIDJOURNEY, STABLE_DIFFUSION, RUNWAY, KLING, FIREFLY, VEO3, NANO_BANANA, GROK, GEMINI]
}


def get_adapter(platform: Union[PlatformId, str]) -> PlatformAdapter:
    try:
        return ADAPTERS[PlatformId(platform)]
    except (ValueError, KeyError):
        raise UnknownPlatform(getattr(platform, "value", platform)) from None


def all_adapters() -> List[PlatformAdapter]:
    return list(ADAPTERS.values())
