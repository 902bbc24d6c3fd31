from typing import Dict, List
from .models import Platform, PlatformId, MediaType

PLATFORMS: List[Platform] = [
    Platform(id=PlatformId.MIDJOURNEY, name="Midjourney", type=MediaType.IMAGE, description="Premium AI image generation"),
    Platform(id=PlatformId.STABLE_DIFFUSION, name="Stable Diffusion", type=MediaType.IMAGE, description="Open-source image generation"),
    Platform(id=PlatformId.RUNWAY, name="Runway", type=MediaType.VIDEO, description="AI video generation and editing"),
    Platform(id=PlatformId.KLING, name="Kling", type=MediaType.VIDEO, description="Advanced AI video synthesis"),
    Platform(id=PlatformId.FIREFLY, name="Adobe Firefly", type=MediaType.IMAGE, description="Adobe's generative AI"),
    Platform(id=PlatformId.VEO3, name="Google Veo 3", type=MediaType.VIDEO, description="Google's video generation model"),
    Platform(id=PlatformId.NANO_BANANA, name="Nano Banana", type=MediaType.BOTH, description="Image generation + editing suite"),
    Platform(id=PlatformId.GROK, name="Grok Aurora", type=MediaType.IMAGE, description="xAI's image generation model"),
    Platform(id=PlatformId.GEMINI, name="Google Gemini", type=MediaType.IMAGE, description="Imagen 3 via the Gemini API"),
]

PLATFORMS_BY_ID: Dict[str, Platform] = {p.id.value: p for p in PLATFORMS}
VALID_PLATFORMS: List[str] = list(PLATFORMS_BY_ID)
