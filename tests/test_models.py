import pydantic
import pytest

from promptforge.models import PresetCategory, PresetCategoryId, PresetOption, PresetSelection, PromptAnalysis
from promptforge.presets import PRESET_CATEGORIES


@pytest.mark.parametrize("raw, expected", [
    (0.42, 0.42),
    (7, 1.0),
    (-0.3, 0.0),
    (None, 0.5),
    ("high", 0.5),
    (True, 0.5),
    (float("nan"), 0.5),
])
def test_ambiguity_score_is_clamped(raw, expected):
    analysis = PromptAnalysis.model_validate({"ambiguityScore": raw})

    assert analysis.ambiguity_score == expected


def test_missing_score_defaults_to_midpoint():
    assert PromptAnalysis.model_validate({}).ambiguity_score == 0.5


def test_analysis_field_defaults():
    analysis = PromptAnalysis.model_validate({
        "subject": None,
        "style": 12,
        "technicalDetails": "macro lens",
    })

    assert analysis.subject == "unspecified"
    assert analysis.style == "unspecified"
    assert analysis.mood == "unspecified"
    assert analysis.technical_details == []


def test_technical_details_keep_only_strings():
    analysis = PromptAnalysis.model_validate({"technicalDetails": ["low angle", 3, None, "85mm"]})

    assert analysis.technical_details == ["low angle", "85mm"]


def test_catalog_fragment_invariant_is_enforced():
    with pytest.raises(pydantic.ValidationError):
        PresetCategory(id=PresetCategoryId.LIGHTING, name="Lighting", icon="x", presets=[
            PresetOption(id="lt-bad", value="golden hour"),
        ])
    with pytest.raises(pydantic.ValidationError):
        PresetCategory(id=PresetCategoryId.ASPECT_RATIOS, name="Aspect Ratio", icon="x", presets=[
            PresetOption(id="ar-bad", prompt_fragment="widescreen"),
        ])


def test_catalog_covers_every_category_with_unique_ids():
    assert [c.id for c in PRESET_CATEGORIES] == list(PresetCategoryId)
    for category in PRESET_CATEGORIES:
        ids = [o.id for o in category.presets]
        assert len(ids) == len(set(ids)), category.id


def test_selection_drops_duplicate_ids():
    selection = PresetSelection(selected={"lighting": ["lt-neon", "lt-golden", "lt-neon"]})

    assert selection.ids(PresetCategoryId.LIGHTING) == ["lt-neon", "lt-golden"]
    assert selection.ids(PresetCategoryId.CAMERAS) == []


def test_applied_lists_every_selected_id():
    selection = PresetSelection(selected={
        "colorPalettes": ["co-warm"],
        "aspectRatios": ["ar-16-9"],
        "lighting": ["lt-neon", "lt-removed"],
    })

    assert selection.applied() == [
        "aspectRatios:ar-16-9",
        "lighting:lt-neon",
        "lighting:lt-removed",
        "colorPalettes:co-warm",
    ]


def test_preset_option_accepts_camel_case():
    option = PresetOption.model_validate({"id": "custom-lighting-1", "promptFragment": "glow"})

    assert option.prompt_fragment == "glow"
    assert option.model_dump(by_alias=True)["promptFragment"] == "glow"
