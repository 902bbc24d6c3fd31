import logging
from typing import Callable, Optional
from google.genai import types

from ..config import (
    get_genai_client, MODEL_REFINE, ANALYSIS_TEMPERATURE, REFINEMENT_TEMPERATURE,
    MAX_ANALYSIS_TOKENS, MAX_REFINEMENT_TOKENS, THINKING_BUDGET
)

# (system_instruction, user_message, *, json_output=False) -> response text or None
TextGenerator = Callable[..., Optional[str]]


def generate_text(system_instruction: str, user_message: str, json_output: bool = False) -> Optional[str]:
    """
    One blocking round-trip to Gemini. Returns the response text, or None when the
    model produced no text. No retries: failures surface to the caller as-is.
    Raises CredentialMissing when no API credential is configured.
    """
    client = get_genai_client()
    config = types.GenerateContentConfig(
        system_instruction=system_instruction,
        temperature=ANALYSIS_TEMPERATURE if json_output else REFINEMENT_TEMPERATURE,
        max_output_tokens=MAX_ANALYSIS_TOKENS if json_output else MAX_REFINEMENT_TOKENS,
        thinking_config={"thinking_budget": THINKING_BUDGET},
    )
    if json_output:
        config.response_mime_type = "application/json"

    logging.info(f"Calling {MODEL_REFINE} (json={json_output})")
    res = client.models.generate_content(model=MODEL_REFINE, contents=[user_message], config=config)
    text = res.text if res.candidates else None
    logging.info(f"{MODEL_REFINE} returned {len(text) if text else 0} chars")
    return text
