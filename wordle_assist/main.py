# MAIN_V5: stateless suggestion API over a dictionary loaded once at startup
from contextlib import asynccontextmanager
from typing import Any, Dict

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from .history import log_event
from .settings import SUGGESTION_LIMIT, MAX_LIMIT
from .modules.wordle.dictionary import load_dictionary, resolve_path
from .modules.wordle.hints import HintError, parse_hints, hint_to_payload
from .modules.wordle.parser import hints_from_feedback
from .modules.wordle.suggest import suggest

@asynccontextmanager
async def lifespan(app: FastAPI):
    # DictionaryError propagates: no dictionary, no server
    words = load_dictionary()
    app.state.words = words
    log_event({"dir":"startup","dict":len(words),"path":str(resolve_path())})
    yield

app = FastAPI(title="wordle-assist", lifespan=lifespan)

class SuggestRequest(BaseModel):
    # checked by parse_hints / hints_from_feedback
    hints: Any = Field(default_factory=list)
    feedback: Any = Field(default_factory=list)
    limit: int = Field(SUGGESTION_LIMIT, ge=1, le=MAX_LIMIT)

@app.get("/", response_class=HTMLResponse)
def home(request: Request):
    n = len(request.app.state.words)
    return f"<h3>wordle-assist online: {n} words loaded; POST /suggest</h3>"

@app.get("/health")
def health(request: Request) -> Dict:
    return {"ok": True, "dict": len(request.app.state.words)}

@app.post("/suggest")
def suggest_endpoint(body: SuggestRequest, request: Request) -> Dict:
    words = request.app.state.words
    try:
        hints = list(parse_hints(body.hints))
        hints += [h for h in hints_from_feedback(body.feedback) if h not in hints]
    except HintError as e:
        log_event({"dir":"err","error":str(e)})
        raise HTTPException(status_code=422, detail=str(e)) from e

    out = suggest(words, hints, limit=body.limit)
    log_event({"dir":"suggest","hints":len(hints),"candidates":out["candidates"],
               "guess":(out["suggestions"] or [None])[0]})
    return {**out, "hints": [hint_to_payload(h) for h in hints]}
