from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional
from ..models import MediaType, PlatformId, PresetSelection

FormatPrompt = Callable[[str, PresetSelection], str]
BuildParameters = Callable[[PresetSelection], Dict[str, Any]]


@dataclass(frozen=True)
class PlatformAdapter:
    """Static platform metadata plus the two pure functions that render for it."""

    id: PlatformId
    name: str
    description: str
    type: MediaType
    supported_aspect_ratios: List[str]
    format_prompt: FormatPrompt
    build_parameters: BuildParameters
    negative_prompt: Optional[str] = None
