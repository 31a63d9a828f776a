from __future__ import annotations
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
import logging
import os
from fastapi.middleware.cors import CORSMiddleware
from typing import Optional
from .schemas import ErrorResponse, OxidationStateSearchResponse, StatusResponse
from ..handlers.oxidation_states import OxidationStateHandler
from dotenv import load_dotenv

APP_TITLE = "Oxidation State Search"
APP_VERSION = "0.0.1"
API_KEY_ENV = "API_KEY"

load_dotenv()

# Configure logging to show INFO messages
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

app = FastAPI(title=APP_TITLE, version=APP_VERSION)
_log = logging.getLogger(__name__)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_api_key() -> Optional[str]:
    """Read the Materials Project API key from the environment at request time."""
    return os.getenv(API_KEY_ENV)


def get_oxidation_state_handler(api_key: Optional[str] = Depends(get_api_key)) -> OxidationStateHandler:
    return OxidationStateHandler(api_key=api_key)


@app.get("/", response_model=StatusResponse)
async def root():
    return {
        "message": APP_TITLE,
        "version": APP_VERSION,
        "status": "operational"
    }


@app.get(
    "/api/oxidation-state",
    responses={
        200: {"model": OxidationStateSearchResponse},
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def oxidation_state(
    query: Optional[str] = None,
    handler: OxidationStateHandler = Depends(get_oxidation_state_handler),
):
    """
    Search Materials Project oxidation states by formula.
    The upstream body is relayed verbatim on success; wildcards (e.g. CrO*) are passed through.
    """
    result = handler.handle_oxidation_state_search({"query": query})
    return JSONResponse(content=result.body, status_code=result.status_code)
