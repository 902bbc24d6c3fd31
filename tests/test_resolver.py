from promptforge.adapters.resolver import find_preset, resolve_aspect_ratio, resolve_fragments
from promptforge.models import PresetCategoryId, PresetOption, PresetSelection
from promptforge.presets import PRESET_CATEGORIES, PRESETS_BY_CATEGORY


def test_fragments_follow_category_then_selection_order():
    selection = PresetSelection(selected={
        PresetCategoryId.COLOR_PALETTES: ["co-warm"],
        PresetCategoryId.LIGHTING: ["lt-neon", "lt-golden"],
    })

    assert resolve_fragments(selection) == [
        "neon lighting",
        "golden hour lighting",
        "warm color palette reds oranges",
    ]


def test_unknown_ids_are_skipped():
    selection = PresetSelection(selected={"lighting": ["lt-neon", "lt-removed"], "cameras": ["cl-gone"]})

    assert resolve_fragments(selection) == ["neon lighting"]


def test_aspect_ratios_never_contribute_fragments():
    selection = PresetSelection(selected={"aspectRatios": ["ar-16-9", "ar-1-1"]})

    assert resolve_fragments(selection) == []


def test_fragment_count_matches_selected_catalog_ids():
    selected = {
        c.id: [o.id for o in c.presets] for c in PRESET_CATEGORIES if c.id != PresetCategoryId.ASPECT_RATIOS
    }
    selection = PresetSelection(selected=selected)

    assert len(resolve_fragments(selection)) == sum(len(ids) for ids in selected.values())


def test_custom_presets_resolve_like_catalog_presets():
    custom = PresetOption(id="custom-lighting-1", label="glow", prompt_fragment="bioluminescent glow")
    selection = PresetSelection(
        selected={"lighting": ["lt-neon", custom.id]},
        custom={"lighting": [custom]},
    )

    assert resolve_fragments(selection) == ["neon lighting", "bioluminescent glow"]


def test_custom_preset_without_fragment_is_skipped():
    blank = PresetOption(id="custom-lighting-2", label="empty", prompt_fragment="")
    selection = PresetSelection(selected={"lighting": [blank.id]}, custom={"lighting": [blank]})

    assert resolve_fragments(selection) == []


def test_catalog_wins_over_custom_with_same_id():
    shadow = PresetOption(id="lt-neon", prompt_fragment="something else")

    found = find_preset(PresetCategoryId.LIGHTING, "lt-neon", {PresetCategoryId.LIGHTING: [shadow]})

    assert found == PRESETS_BY_CATEGORY[PresetCategoryId.LIGHTING]["lt-neon"]


def test_find_preset_returns_none_for_unknown_id():
    assert find_preset(PresetCategoryId.CAMERAS, "cl-nope") is None
    assert find_preset(PresetCategoryId.CAMERAS, "cl-nope", {}) is None


def test_aspect_ratio_first_supported_selection_wins():
    selection = PresetSelection(selected={"aspectRatios": ["ar-21-9", "ar-9-16", "ar-16-9"]})

    assert resolve_aspect_ratio(selection, ["16:9", "9:16"]) == "9:16"


def test_aspect_ratio_absent_when_nothing_matches():
    selection = PresetSelection(selected={"aspectRatios": ["ar-21-9", "ar-missing"]})

    assert resolve_aspect_ratio(selection, ["16:9"]) is None
    assert resolve_aspect_ratio(PresetSelection(), ["16:9"]) is None


def test_aspect_ratio_is_always_a_supported_value():
    ids = [o.id for o in PRESET_CATEGORIES[0].presets] + ["ar-unknown"]
    for supported in (["1:1"], ["16:9", "9:16"], ["3:2", "2:3", "1:1"], []):
        for first in ids:
            for second in ids:
                selection = PresetSelection(selected={"aspectRatios": [first, second]})
                result = resolve_aspect_ratio(selection, supported)
                assert result is None or result in supported


def test_custom_aspect_ratio_uses_literal_value():
    custom = PresetOption(id="custom-aspectRatios-3", label="2.39:1", value="2.39:1")
    selection = PresetSelection(selected={"aspectRatios": [custom.id]}, custom={"aspectRatios": [custom]})

    assert resolve_aspect_ratio(selection, ["16:9", "2.39:1"]) == "2.39:1"
    assert resolve_aspect_ratio(selection, ["16:9"]) is None
