import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple, Union

from ..adapters.registry import get_adapter
from ..config import MODEL_REFINE
from ..errors import AnalysisUnavailable, RefinementUnavailable
from ..models import (
    PlatformId, PresetSelection, PromptAnalysis, RefinedPrompt, RefinementMetadata, UNSPECIFIED
)
from ..prompts import (
    PROMPT_ANALYSIS, PROMPT_ANALYSIS_REQUEST, PROMPT_REFINEMENT, PROMPT_REFINEMENT_REQUEST,
    QUESTION_VAGUENESS, QUESTION_STYLE, QUESTION_MOOD, QUESTION_CONTEXT, QUESTION_PURPOSE
)
from .assembler import build_prompt
from .llm import TextGenerator, generate_text


class RefinementState(str, Enum):
    IDLE = "idle"
    ANALYZING = "analyzing"
    QUESTIONS_PENDING = "questions_pending"
    REFINING = "refining"
    DONE = "done"
    FAILED = "failed"


# === QUESTIONS ===
QuestionRule = Callable[[PromptAnalysis], Optional[str]]


def _unspecified(value: str) -> bool:
    return not value or value == UNSPECIFIED


# Independent rules; every rule that fires contributes a question, in this order.
QUESTION_RULES: Tuple[QuestionRule, ...] = (
    lambda a: QUESTION_VAGUENESS.format(subject=a.subject) if a.ambiguity_score > 0.5 else None,
    lambda a: QUESTION_STYLE if _unspecified(a.style) else None,
    lambda a: QUESTION_MOOD if _unspecified(a.mood) else None,
    lambda a: QUESTION_CONTEXT if a.ambiguity_score > 0.3 else None,
    lambda a: QUESTION_PURPOSE,
)


def generate_questions(analysis: PromptAnalysis) -> List[str]:
    return [q for q in (rule(analysis) for rule in QUESTION_RULES) if q]


def has_answers(answers: Optional[Dict[str, str]]) -> bool:
    return any(a and a.strip() for a in (answers or {}).values())


# === ANALYSIS ===
def parse_json_response(text: str) -> dict:
    try:
        payload = json.loads(text)
    except ValueError as e:
        logging.error(f"JSON Parse Error for PromptAnalysis: {text}")
        raise AnalysisUnavailable(f"Failed to parse PromptAnalysis: {e}") from e
    if not isinstance(payload, dict):
        raise AnalysisUnavailable("Failed to parse PromptAnalysis: expected a JSON object")
    return payload


def analyze_prompt(raw_input: str, generate: TextGenerator = generate_text) -> PromptAnalysis:
    text = generate(PROMPT_ANALYSIS, PROMPT_ANALYSIS_REQUEST.format(user_input=raw_input), json_output=True)
    if not text:
        raise AnalysisUnavailable("No text response received from analysis model")

    payload = parse_json_response(text)
    if payload.get("intent") is None:
        payload["intent"] = raw_input
    analysis = PromptAnalysis.model_validate(payload)
    logging.debug(f"Analysis: {analysis.model_dump_json()}")
    return analysis


# === REFINEMENT ===
def build_refinement_context(raw_input: str, platform: str, draft: str, answers: Optional[Dict[str, str]] = None) -> str:
    parts = [
        f'Original user input: "{raw_input}"',
        f"Target platform: {platform}",
        f'Assembled prompt with presets: "{draft}"',
    ]
    pairs = [f"Q: {q}\nA: {a}" for q, a in (answers or {}).items() if a and a.strip()]
    if pairs:
        parts.append("Additional context from user:\n" + "\n\n".join(pairs))
    return "\n\n".join(parts)


def refine_prompt(
    raw_input: str,
    selection: PresetSelection,
    platform: Union[PlatformId, str],
    answers: Optional[Dict[str, str]] = None,
    generate: TextGenerator = generate_text,
) -> RefinedPrompt:
    adapter = get_adapter(platform)
    analysis = analyze_prompt(raw_input, generate)
    draft = build_prompt(analysis, selection, adapter.id)

    context = build_refinement_context(raw_input, adapter.id.value, draft, answers)
    text = generate(PROMPT_REFINEMENT, PROMPT_REFINEMENT_REQUEST.format(platform=adapter.id.value, context=context))
    if not text or not text.strip():
        raise RefinementUnavailable("No text response received from refinement model")

    fields = dict(
        platform=adapter.id,
        prompt=text.strip(),
        # built from the selection, not the draft
        parameters=adapter.build_parameters(selection),
        metadata=RefinementMetadata(
            original_input=raw_input,
            presets_applied=selection.applied(),
            refinement_timestamp=datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            model_used=MODEL_REFINE,
        ),
    )
    if adapter.negative_prompt:
        fields["negative_prompt"] = adapter.negative_prompt
    return RefinedPrompt(**fields)


# === PIPELINE ===
@dataclass
class RefinementOutcome:
    questions: List[str] = field(default_factory=list)
    result: Optional[RefinedPrompt] = None


class RefinementPipeline:
    """
    Drives a single request through idle -> analyzing -> {questions_pending | refining} -> done.
    Any error moves to failed and is re-raised for the caller to report.
    One instance per request.
    """

    def __init__(self, generate: TextGenerator = generate_text):
        self.generate = generate
        self.state = RefinementState.IDLE

    def _transition(self, state: RefinementState):
        logging.info(f"Refinement {self.state.value} -> {state.value}")
        self.state = state

    def run(
        self,
        raw_input: str,
        platform: Union[PlatformId, str],
        selection: PresetSelection,
        answers: Optional[Dict[str, str]] = None,
    ) -> RefinementOutcome:
        try:
            if not has_answers(answers):
                self._transition(RefinementState.ANALYZING)
                questions = generate_questions(analyze_prompt(raw_input, self.generate))
                if questions:
                    self._transition(RefinementState.QUESTIONS_PENDING)
                    logging.info(f"Asking {len(questions)} clarifying questions")
                    return RefinementOutcome(questions=questions)

            self._transition(RefinementState.REFINING)
            result = refine_prompt(raw_input, selection, platform, answers, self.generate)
            self._transition(RefinementState.DONE)
            return RefinementOutcome(result=result)
        except Exception:
            self._transition(RefinementState.FAILED)
            raise
