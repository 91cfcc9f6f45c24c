"""FastAPI server exposing the food entry parser."""

import os
from functools import lru_cache
from typing import Any, Dict, List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from src.data_layer.exceptions import ParserConfigError
from src.data_layer.parser_config import load_parser
from src.output.formatters import format_parse_entry
from src.parsing.lexicons import synonyms_by_unit
from src.parsing.parse_errors import NoMatchError
from src.parsing.quantity_parser import QuantityParser


config_path = os.environ.get("PARSER_CONFIG", "config/parser_config.yaml")

app = FastAPI(title="Food Entry Parser API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Local development
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ParseRequest(BaseModel):
    text: str
    strict: Optional[bool] = None


class BatchParseRequest(BaseModel):
    texts: List[str] = Field(default_factory=list)
    strict: Optional[bool] = None


@lru_cache(maxsize=None)
def get_parser(strict: Optional[bool] = None) -> QuantityParser:
    """Return the parser for the configured lexicons, built once per strictness."""
    return load_parser(config_path, strict=strict)


def _parser_for(strict: Optional[bool]) -> QuantityParser:
    try:
        return get_parser(strict)
    except ParserConfigError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@app.post("/api/parse")
def parse_entry(request: ParseRequest) -> Dict[str, Any]:
    quantity_parser = _parser_for(request.strict)
    try:
        return quantity_parser.parse_or_raise(request.text).to_dict()
    except NoMatchError as exc:
        raise HTTPException(status_code=422, detail=exc.to_dict()) from exc


@app.post("/api/parse/batch")
def parse_entries(request: BatchParseRequest) -> List[Dict[str, Any]]:
    quantity_parser = _parser_for(request.strict)
    entries = []
    for text in request.texts:
        try:
            entries.append(format_parse_entry(text, result=quantity_parser.parse_or_raise(text)))
        except NoMatchError as exc:
            entries.append(format_parse_entry(text, error=exc))
    return entries


@app.get("/api/units")
def list_units() -> Dict[str, List[str]]:
    """Canonical units with every spelling the parser accepts for them."""
    quantity_parser = _parser_for(None)
    return {
        unit: sorted(spellings)
        for unit, spellings in synonyms_by_unit(quantity_parser.unit_synonyms).items()
    }


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
