import os
import functools
import logging
from dotenv import load_dotenv
from google import genai

from .errors import CredentialMissing

load_dotenv()

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
USE_VERTEXAI = os.getenv("GOOGLE_GENAI_USE_VERTEXAI", "false").lower() in ("1", "true", "yes")
PROJECT_ID = os.getenv("GOOGLE_CLOUD_PROJECT")
LOCATION = os.getenv("GOOGLE_CLOUD_LOCATION", "global")

MODEL_REFINE = os.getenv("PROMPTFORGE_MODEL", "gemini-2.5-flash")
ANALYSIS_TEMPERATURE = float(os.getenv("ANALYSIS_TEMPERATURE", "0.2"))
REFINEMENT_TEMPERATURE = float(os.getenv("REFINEMENT_TEMPERATURE", "0.7"))
MAX_ANALYSIS_TOKENS = int(os.getenv("MAX_ANALYSIS_TOKENS", "1024"))
MAX_REFINEMENT_TOKENS = int(os.getenv("MAX_REFINEMENT_TOKENS", "2048"))
# Output token limits above assume thinking is off; -1 lets the model decide
THINKING_BUDGET = int(os.getenv("THINKING_BUDGET", "0"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]


@functools.lru_cache(maxsize=1)
def get_genai_client() -> genai.Client:
    """
    Builds the Gemini client from the environment once and reuses it.
    An API key wins over Vertex AI; with neither configured the service is unavailable.
    """
    if GEMINI_API_KEY:
        return genai.Client(api_key=GEMINI_API_KEY)
    if USE_VERTEXAI and PROJECT_ID:
        logging.debug(f"Using Vertex AI project {PROJECT_ID} ({LOCATION})")
        return genai.Client(project=PROJECT_ID, location=LOCATION, vertexai=True)
    raise CredentialMissing("GEMINI_API_KEY environment variable is not set")
