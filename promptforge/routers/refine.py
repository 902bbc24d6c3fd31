import logging
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from ..dependencies import get_text_generator
from ..errors import PromptForgeError, ValidationError
from ..models import PresetCategoryId, PresetSelection, RefineRequest, RefineResponse
from ..platforms import VALID_PLATFORMS
from ..services.engine import RefinementPipeline
from ..services.llm import TextGenerator

router = APIRouter()

CATEGORY_IDS = {c.value for c in PresetCategoryId}


def respond(status_code: int = 200, **fields) -> JSONResponse:
    body = RefineResponse(**fields).model_dump(mode="json", by_alias=True, exclude_unset=True)
    return JSONResponse(body, status_code=status_code)


def validate_request(request: RefineRequest) -> PresetSelection:
    """Boundary checks. Anything that passes here is a well-formed pipeline request."""
    if not isinstance(request.input, str) or not request.input.strip():
        raise ValidationError('Missing or empty "input" field')
    if request.platform not in VALID_PLATFORMS:
        raise ValidationError(f"Invalid platform. Must be one of: {', '.join(VALID_PLATFORMS)}")

    unknown = sorted((set(request.presets) | set(request.custom_presets)) - CATEGORY_IDS)
    if unknown:
        raise ValidationError(f"Unknown preset categories: {', '.join(unknown)}")
    return PresetSelection(selected=request.presets, custom=request.custom_presets)


@router.post("/api/refine", response_model=RefineResponse)
def refine_endpoint(request: RefineRequest, generate: TextGenerator = Depends(get_text_generator)):
    try:
        selection = validate_request(request)
        outcome = RefinementPipeline(generate).run(request.input, request.platform, selection, request.answers)
    except PromptForgeError as e:
        logging.error(f"Refine failed ({type(e).__name__}): {e.message}")
        return respond(e.status_code, success=False, error=e.message)
    except Exception as e:
        logging.error(f"Refine API error: {e}", exc_info=True)
        return respond(500, success=False, error=str(e) or "Internal server error")

    if outcome.result is None:
        return respond(success=True, questions=outcome.questions)
    return respond(success=True, data=outcome.result)
