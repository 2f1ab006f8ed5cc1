from __future__ import annotations
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict
import logging, typing as t

# ---- Engine imports ----
from psych_core import config
from psych_core.catalog import CatalogError, load_catalog
from psych_core.engine import SCORE_VERSION, score_payload

log = logging.getLogger(__name__)

app = FastAPI(title="Buyer Psychology Scoring API")


@app.get("/")
def root():
    return {"status": "ok", "service": "buyer-psych-api"}


app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins(),
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    allow_credentials=False,
    max_age=86400,
)


# ---- Schemas ----
class ScoreReq(BaseModel):
    model_config = ConfigDict(extra="allow")

    answers: dict[str, t.Any] | None = None
    styleVsPriceSlider: t.Any = None
    sliderValue: t.Any = None
    conditionPreference: t.Any = None
    brief: dict[str, t.Any] | None = None


# ---- Helpers ----
def _catalog_or_500():
    try:
        return load_catalog()
    except CatalogError as e:
        log.error("item catalog unavailable: %s", e)
        raise HTTPException(500, f"item catalog unavailable: {e}")


def _serialize_item(it) -> dict[str, t.Any]:
    return {
        "id": it.id,
        "dimension": it.dimension,
        "reverse": it.reverse,
        "controlPair": it.control_pair,
        "kind": it.kind,
        "text": it.text,
    }


# ---- Health ----
@app.get("/health")
def health():
    catalog = _catalog_or_500()
    return {
        "version": SCORE_VERSION,
        "catalog_items": len(catalog),
        "clamp_answers": config.CLAMP_ANSWERS,
    }


@app.get("/catalog")
def get_catalog():
    catalog = _catalog_or_500()
    return {"version": SCORE_VERSION, "items": [_serialize_item(it) for it in catalog.list_all()]}


@app.post("/score")
def score(req: ScoreReq):
    catalog = _catalog_or_500()
    body = req.model_dump()
    return {"ok": True, **score_payload(body, catalog=catalog)}
