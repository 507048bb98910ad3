import logging
from functools import lru_cache

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from pratt.analyzer import analyze
from pratt.config import SERVER_CONFIG
from pratt.errors import ParseError
from pratt.grammar import check_against_reference
from pratt.operators import list_operators
from pratt.parser import parse

logger = logging.getLogger(__name__)

app = FastAPI(title="Pratt infix-to-postfix")

class ExprBody(BaseModel):
    expr: str


def _check_length(src: str):
    limit = SERVER_CONFIG["max_source_length"]
    if len(src) > limit:
        raise HTTPException(status_code=400, detail=f"expression longer than {limit} characters")


@lru_cache(maxsize=SERVER_CONFIG["parse_cache_size"])
def _cached_parse(src: str) -> str:
    # parse() is deterministic and keeps no state between calls
    return parse(src)


@app.get("/operators")
def operators():
    return {"operators": list_operators()}

@app.post("/parse")
def parse_expr(body: ExprBody):
    _check_length(body.expr)
    try:
        postfix = _cached_parse(body.expr)
    except ParseError as e:
        logger.warning("rejected %r: %s", body.expr, e)
        raise HTTPException(status_code=400, detail=str(e))
    meta = analyze(postfix)
    return {
        "ok": True,
        "postfix": postfix,
        "variables": sorted(meta.variables),
        "operators": dict(meta.operators),
        "depth": meta.depth,
    }

@app.post("/check")
def check(body: ExprBody):
    _check_length(body.expr)
    cmp = check_against_reference(body.expr)
    if not cmp.ok:
        logger.warning("parsers disagree on %r: %r vs %r", cmp.source, cmp.postfix, cmp.reference)
    return {"ok": cmp.ok, "postfix": cmp.postfix, "reference": cmp.reference}
