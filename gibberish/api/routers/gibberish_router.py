"""
Gibberish HTTP routes: train a named model, generate from it, dump it.
"""
import random
from collections import OrderedDict
from typing import Literal, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from gibberish.config import settings
from gibberish.services.gibberish import generate as generate_tokens
from gibberish.services.gibberish import render, train_from_lines
from gibberish.services.ranking import RankedNeighbors
from gibberish.utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/gibberish", tags=["gibberish"])

# In-memory model cache, least recently trained evicted first
MODEL_CACHE: "OrderedDict[str, tuple[str, RankedNeighbors]]" = OrderedDict()


class TrainRequest(BaseModel):
    lines: list[str]
    mode: Literal["word", "char"] = settings.DEFAULT_MODE
    model_name: str = "default"


class GenerateRequest(BaseModel):
    model_name: str = "default"
    seed: str = settings.DEFAULT_SEED_TOKEN
    word_count: int = Field(default=settings.DEFAULT_WORD_COUNT, ge=0)
    threshold: float = settings.DEFAULT_THRESHOLD
    stubbornness: int = Field(default=settings.DEFAULT_STUBBORNNESS, ge=0)
    random_seed: Optional[int] = None


def _get_model(model_name: str) -> tuple:
    entry = MODEL_CACHE.get(model_name)
    if entry is None:
        raise HTTPException(status_code=404, detail="model not found, train first")
    return entry


@router.post("/train")
async def train(req: TrainRequest):
    if not any(line.strip() for line in req.lines):
        raise HTTPException(status_code=400, detail="lines are empty")
    ranked = train_from_lines(req.lines, req.mode)
    MODEL_CACHE[req.model_name] = (req.mode, ranked)
    MODEL_CACHE.move_to_end(req.model_name)
    while len(MODEL_CACHE) > settings.MAX_CACHED_MODELS:
        evicted, _ = MODEL_CACHE.popitem(last=False)
        logger.info(f"[Gibberish] Evicted model '{evicted}' from cache")
    return {"ok": True, "model": req.model_name, "mode": req.mode, "tokens": len(ranked)}


@router.post("/generate")
async def generate(req: GenerateRequest):
    mode, ranked = _get_model(req.model_name)
    tokens = generate_tokens(
        ranked,
        req.seed,
        req.word_count,
        threshold=req.threshold,
        mode=mode,
        rng=random.Random(req.random_seed),
        stubbornness=req.stubbornness,
    )
    return {"ok": True, "data": {"text": render(tokens, mode), "tokens": tokens}}


@router.get("/model/{model_name}")
async def dump_model(model_name: str):
    mode, ranked = _get_model(model_name)
    return {"ok": True, "data": {"mode": mode, "neighbors": ranked.to_dict()}}
