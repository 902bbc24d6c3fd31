import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from .config import CORS_ORIGINS, LOG_LEVEL, MODEL_REFINE
from .routers import catalog, refine

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

app = FastAPI(title="PromptForge Refinement API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(refine.router)
app.include_router(catalog.router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logging.warning(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
    return JSONResponse({"success": False, "error": "Malformed request body"}, status_code=400)


@app.get("/health")
async def health_check():
    return {"status": "ok", "model": MODEL_REFINE}
