from promptforge.models import PresetSelection, PromptAnalysis
from promptforge.services.assembler import build_base_prompt, build_prompt


def test_base_prompt_keeps_subject_first():
    analysis = PromptAnalysis(
        intent="A portrait of an old fisherman",
        subject="old fisherman",
        style="oil painting",
        mood="melancholic",
        technical_details=["close-up", "", "rim light"],
        ambiguity_score=0.2,
    )

    assert build_base_prompt(analysis) == (
        "old fisherman, A portrait of an old fisherman, oil painting, melancholic mood, close-up, rim light"
    )


def test_placeholders_and_repeated_intent_are_dropped():
    assert build_base_prompt(PromptAnalysis(intent="dog", subject="dog")) == "dog"
    assert build_base_prompt(PromptAnalysis(intent="something cozy")) == "something cozy"
    assert build_base_prompt(PromptAnalysis()) == ""


def test_build_prompt_formats_through_adapter():
    analysis = PromptAnalysis(intent="dog", subject="dog", mood="playful")
    selection = PresetSelection(selected={"lighting": ["lt-golden"]})

    assert build_prompt(analysis, selection, "firefly") == "dog, playful mood. golden hour lighting"
    assert build_prompt(analysis, selection, "gemini") == "dog, playful mood, golden hour lighting"
