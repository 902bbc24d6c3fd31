from typing import Any, Dict
from ..models import MediaType, PlatformId, PresetSelection
from .base import PlatformAdapter
from .resolver import join_parts, resolve_aspect_ratio, resolve_fragments

# === MIDJOURNEY ===
MIDJOURNEY_RATIOS = ["1:1", "16:9", "9:16", "4:3", "3:4", "2:3", "3:2", "4:5", "5:4", "7:4", "4:7", "21:9", "2.39:1"]
MIDJOURNEY_VERSION = "6.1"


def midjourney_parameters(selection: PresetSelection) -> Dict[str, Any]:
    return {
        "v": MIDJOURNEY_VERSION,
        "ar": resolve_aspect_ratio(selection, MIDJOURNEY_RATIOS) or "1:1",
    }


def midjourney_prompt(base_prompt: str, selection: PresetSelection) -> str:
    prompt = join_parts(base_prompt, resolve_fragments(selection))
    suffix = " ".join(f"--{key} {val}" for key, val in midjourney_parameters(selection).items())
    return f"{prompt} {suffix}" if suffix else prompt


# === STABLE DIFFUSION / COMFYUI ===
STABLE_DIFFUSION_RATIOS = ["1:1", "16:9", "9:16", "4:3", "3:4", "2:3", "3:2", "4:5", "5:4", "21:9", "2.39:1"]
QUALITY_TOKENS = ["(masterpiece:1.2)", "(best quality:1.2)"]
NEGATIVE_PROMPT = ", ".join([
    "(worst quality:1.4)", "(low quality:1.4)", "blurry", "jpeg artifacts", "watermark",
    "text", "logo", "deformed", "disfigured", "bad anatomy", "extra limbs",
])
SDXL_RESOLUTIONS = {
    "1:1": (1024, 1024),
    "16:9": (1344, 768),
    "9:16": (768, 1344),
    "4:3": (1152, 896),
    "3:4": (896, 1152),
    "2:3": (832, 1216),
    "3:2": (1216, 832),
    "4:5": (896, 1088),
    "5:4": (1088, 896),
    "21:9": (1536, 640),
    "2.39:1": (1536, 640),
}
DEFAULT_RESOLUTION = (1024, 1024)


def stable_diffusion_prompt(base_prompt: str, selection: PresetSelection) -> str:
    positive = join_parts(", ".join(QUALITY_TOKENS), [base_prompt, *resolve_fragments(selection)])
    return f"Positive:\n{positive}\n\nNegative:\n{NEGATIVE_PROMPT}"


def stable_diffusion_parameters(selection: PresetSelection) -> Dict[str, Any]:
    ar = resolve_aspect_ratio(selection, STABLE_DIFFUSION_RATIOS)
    width, height = SDXL_RESOLUTIONS.get(ar, DEFAULT_RESOLUTION) if ar else DEFAULT_RESOLUTION
    return {
        "width": width,
        "height": height,
        "steps": 30,
        "cfg_scale": 7.5,
        "sampler": "DPM++ 2M Karras",
    }


# === ADOBE FIREFLY ===
FIREFLY_RATIOS = ["1:1", "16:9", "9:16", "4:3", "3:4", "4:5", "3:2"]


def firefly_prompt(base_prompt: str, selection: PresetSelection) -> str:
    return join_parts(base_prompt, resolve_fragments(selection), ". ")


def firefly_parameters(selection: PresetSelection) -> Dict[str, Any]:
    return {
        "aspect_ratio": resolve_aspect_ratio(selection, FIREFLY_RATIOS) or "1:1",
        "content_type": "art",
        "visual_intensity": "medium",
        "style_strength": "medium",
        "locale": "en-US",
    }


# === NANO BANANA ===
NANO_BANANA_RATIOS = ["1:1", "16:9", "9:16", "4:3", "3:4", "4:5", "3:2"]


def nano_banana_prompt(base_prompt: str, selection: PresetSelection) -> str:
    # Conversational editor: sentences, not comma lists
    return join_parts(base_prompt, resolve_fragments(selection), ". ")


def nano_banana_parameters(selection: PresetSelection) -> Dict[str, Any]:
    return {
        "aspect_ratio": resolve_aspect_ratio(selection, NANO_BANANA_RATIOS) or "1:1",
        "model": "pro-v2",
        "resolution": "2048x2048",
        "mode": "generate",
        "style_reference": None,
        "conversational_refinement": True,
    }


# === GROK AURORA ===
# TODO: widen once xAI documents the Aurora ratio set
GROK_RATIOS = ["3:2", "2:3", "1:1"]


def grok_prompt(base_prompt: str, selection: PresetSelection) -> str:
    return join_parts(base_prompt, resolve_fragments(selection))


def grok_parameters(selection: PresetSelection) -> Dict[str, Any]:
    return {
        "aspect_ratio": resolve_aspect_ratio(selection, GROK_RATIOS) or "3:2",
        "photorealistic_strength": "high",
    }


# === GOOGLE GEMINI (IMAGEN 3) ===
GEMINI_RATIOS = ["1:1", "16:9", "9:16", "3:4", "4:3"]


def gemini_prompt(base_prompt: str, selection: PresetSelection) -> str:
    return join_parts(base_prompt, resolve_fragments(selection))


def gemini_parameters(selection: PresetSelection) -> Dict[str, Any]:
    return {
        "model": "imagen-3",
        "aspect_ratio": resolve_aspect_ratio(selection, GEMINI_RATIOS) or "1:1",
        "output_format": "png",
        "safety_filter": "standard",
        "person_generation": "allow",
    }


MIDJOURNEY = PlatformAdapter(
    id=PlatformId.MIDJOURNEY,
    name="Midjourney",
    description="AI image generation via Discord or the Midjourney web app. Uses --ar, --v, --s, --c, --w parameters.",
    type=MediaType.IMAGE,
    supported_aspect_ratios=MIDJOURNEY_RATIOS,
    format_prompt=midjourney_prompt,
    build_parameters=midjourney_parameters,
)

STABLE_DIFFUSION = PlatformAdapter(
    id=PlatformId.STABLE_DIFFUSION,
    name="Stable Diffusion / ComfyUI",
    description="Open-source image generation with positive/negative prompt separation and (word:weight) syntax.",
    type=MediaType.IMAGE,
    supported_aspect_ratios=STABLE_DIFFUSION_RATIOS,
    format_prompt=stable_diffusion_prompt,
    build_parameters=stable_diffusion_parameters,
    negative_prompt=NEGATIVE_PROMPT,
)

FIREFLY = PlatformAdapter(
    id=PlatformId.FIREFLY,
    name="Adobe Firefly",
    description="Adobe's commercially-safe AI image generator. Clean natural language prompts with style reference support.",
    type=MediaType.IMAGE,
    supported_aspect_ratios=FIREFLY_RATIOS,
    format_prompt=firefly_prompt,
    build_parameters=firefly_parameters,
)

NANO_BANANA = PlatformAdapter(
    id=PlatformId.NANO_BANANA,
    name="Nano Banana",
    description="Image generation and editing with V1 (standard) and Pro V2 (2K). Supports inpainting, outpainting, background replacement and conversational refinement.",
    type=MediaType.IMAGE,
    supported_aspect_ratios=NANO_BANANA_RATIOS,
    format_prompt=nano_banana_prompt,
    build_parameters=nano_banana_parameters,
)

GROK = PlatformAdapter(
    id=PlatformId.GROK,
    name="Grok Aurora",
    description="xAI's Grok-powered image generation with photorealistic rendering.",
    type=MediaType.IMAGE,
    supported_aspect_ratios=GROK_RATIOS,
    format_prompt=grok_prompt,
    build_parameters=grok_parameters,
)

GEMINI = PlatformAdapter(
    id=PlatformId.GEMINI,
    name="Google Gemini",
    description="Google Imagen 3 via the Gemini API. Responds best to descriptive natural language with clear subject, style, and composition details.",
    type=MediaType.IMAGE,
    supported_aspect_ratios=GEMINI_RATIOS,
    format_prompt=gemini_prompt,
    build_parameters=gemini_parameters,
)
