from typing import Any, Dict
from ..models import MediaType, PlatformId, PresetSelection
from .base import PlatformAdapter
from .resolver import join_parts, resolve_aspect_ratio, resolve_fragments

# Only the first line of each block is built from the request. Motion and camera
# lines are fixed until presets learn to drive them.

# === RUNWAY GEN-3 ===
RUNWAY_RATIOS = ["16:9", "9:16", "1:1", "2.39:1"]
RUNWAY_MOTION = "[Motion] Smooth, cinematic motion with natural movement"
RUNWAY_CAMERA = "[Camera] Slow dolly forward with subtle parallax"


def runway_prompt(base_prompt: str, selection: PresetSelection) -> str:
    visual = join_parts(base_prompt, resolve_fragments(selection))
    return "\n".join([f"[Visual] {visual}", RUNWAY_MOTION, RUNWAY_CAMERA])


def runway_parameters(selection: PresetSelection) -> Dict[str, Any]:
    return {
        "aspect_ratio": resolve_aspect_ratio(selection, RUNWAY_RATIOS) or "16:9",
        "duration": "10s",
        "motion_intensity": "medium",
        "interpolation": True,
    }


# === KLING ===
KLING_RATIOS = ["16:9", "9:16", "1:1"]
KLING_MOTION = "Motion: Fluid natural movement, smooth transitions"
KLING_CAMERA = "Camera: Cinematic camera work with gradual panning"


def kling_prompt(base_prompt: str, selection: PresetSelection) -> str:
    scene = join_parts(base_prompt, resolve_fragments(selection))
    return "\n".join([f"Scene: {scene}", KLING_MOTION, KLING_CAMERA])


def kling_parameters(selection: PresetSelection) -> Dict[str, Any]:
    return {
        "aspect_ratio": resolve_aspect_ratio(selection, KLING_RATIOS) or "16:9",
        "duration": "5s",
        "mode": "standard",
        "creativity": 0.5,
        "camera_control": "auto",
    }


# === GOOGLE VEO 3 ===
VEO3_RATIOS = ["16:9", "9:16"]
VEO3_CAMERA = "[Camera] Cinematic camera movement at 24fps"
VEO3_AUDIO = "[Audio] Ambient sound design matching the visual mood"


def veo3_prompt(base_prompt: str, selection: PresetSelection) -> str:
    scene = join_parts(base_prompt, resolve_fragments(selection))
    return "\n".join([f"[Scene] {scene}", VEO3_CAMERA, VEO3_AUDIO])


def veo3_parameters(selection: PresetSelection) -> Dict[str, Any]:
    return {
        "aspect_ratio": resolve_aspect_ratio(selection, VEO3_RATIOS) or "16:9",
        "resolution": "1080p",
        "fps": 24,
        "duration": "6s",
        "mode": "text-to-video",
        "audio_generation": True,
        "dialogue_enabled": False,
        "reference_image": None,
    }


RUNWAY = PlatformAdapter(
    id=PlatformId.RUNWAY,
    name="Runway",
    description="AI video generation with text-to-video, motion descriptions, camera movements, and configurable duration.",
    type=MediaType.VIDEO,
    supported_aspect_ratios=RUNWAY_RATIOS,
    format_prompt=runway_prompt,
    build_parameters=runway_parameters,
)

KLING = PlatformAdapter(
    id=PlatformId.KLING,
    name="Kling",
    description="AI video generation with text-to-video, motion control, camera parameters, and duration settings.",
    type=MediaType.VIDEO,
    supported_aspect_ratios=KLING_RATIOS,
    format_prompt=kling_prompt,
    build_parameters=kling_parameters,
)

VEO3 = PlatformAdapter(
    id=PlatformId.VEO3,
    name="Google Veo 3",
    description="Google's video generation model supporting 720p to 4K, 24fps, audio/dialogue generation, and reference image consistency.",
    type=MediaType.VIDEO,
    supported_aspect_ratios=VEO3_RATIOS,
    format_prompt=veo3_prompt,
    build_parameters=veo3_parameters,
)
