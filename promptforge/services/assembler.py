from typing import Union
from ..adapters.registry import get_adapter
from ..models import PlatformId, PresetSelection, PromptAnalysis, UNSPECIFIED


def build_base_prompt(analysis: PromptAnalysis) -> str:
    """
    Subject first, then intent, style, mood and technical details, comma separated.
    Leading tokens carry the most weight on several platforms, so the order is fixed.
    """
    parts = []
    if analysis.subject and analysis.subject != UNSPECIFIED:
        parts.append(analysis.subject)
    if analysis.intent and analysis.intent != analysis.subject:
        parts.append(analysis.intent)
    if analysis.style and analysis.style != UNSPECIFIED:
        parts.append(analysis.style)
    if analysis.mood and analysis.mood != UNSPECIFIED:
        parts.append(f"{analysis.mood} mood")
    parts.extend(d for d in analysis.technical_details if d)
    return ", ".join(parts)


def build_prompt(analysis: PromptAnalysis, selection: PresetSelection, platform: Union[PlatformId, str]) -> str:
    adapter = get_adapter(platform)
    return adapter.format_prompt(build_base_prompt(analysis), selection)
