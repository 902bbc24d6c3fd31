from typing import Dict, List, Optional
from ..models import PresetCategoryId, PresetOption, PresetSelection
from ..presets import PRESETS_BY_CATEGORY

FRAGMENT_CATEGORIES = [c for c in PresetCategoryId if c != PresetCategoryId.ASPECT_RATIOS]


def find_preset(category: PresetCategoryId, option_id: str, custom: Dict[PresetCategoryId, List[PresetOption]] = None) -> Optional[PresetOption]:
    """Catalog first, then the user's custom presets for that category."""
    option = PRESETS_BY_CATEGORY.get(category, {}).get(option_id)
    if option: return option
    if custom:
        return next((p for p in custom.get(category, []) if p.id == option_id), None)
    return None


def resolve_fragments(selection: PresetSelection) -> List[str]:
    """
    Collects prompt fragments for every selected preset except aspect ratios,
    in category order then selection order. Unknown ids are skipped.
    """
    fragments = []
    for category in FRAGMENT_CATEGORIES:
        for option_id in selection.ids(category):
            option = find_preset(category, option_id, selection.custom)
            if option and isinstance(option.prompt_fragment, str) and option.prompt_fragment:
                fragments.append(option.prompt_fragment)
    return fragments


def resolve_aspect_ratio(selection: PresetSelection, supported: List[str]) -> Optional[str]:
    """First selected aspect ratio the platform supports, or None. Selection order wins, not closeness."""
    for option_id in selection.ids(PresetCategoryId.ASPECT_RATIOS):
        option = find_preset(PresetCategoryId.ASPECT_RATIOS, option_id, selection.custom)
        if option and isinstance(option.value, str) and option.value in supported:
            return option.value
    return None


def join_parts(base_prompt: str, fragments: List[str], separator: str = ", ") -> str:
    return separator.join(p for p in [base_prompt, *fragments] if p)
