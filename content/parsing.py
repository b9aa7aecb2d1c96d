"""content.parsing

Tolerant JSON parsing for generator output.

Model replies are often "almost JSON". Cleaning is purely textual, nothing
is executed:
- code fences are stripped
- the outermost {...} block is kept
- smart quotes / nbsp are normalized
- raw newlines inside string literals are escaped
- trailing commas are dropped
Then json.loads, with ast.literal_eval as a last resort for
single-quoted / Python-literal replies.
"""

from __future__ import annotations

import ast
import json
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from core.errors import ProviderError


@dataclass(frozen=True)
class ParseResult:
    data: Optional[Dict[str, Any]]
    raw: str
    cleaned: str
    error: str = ""


_FENCE = re.compile(r"```[a-zA-Z]*\s*(.*?)```", re.DOTALL)
_TRAILING_COMMA = re.compile(r",\s*(?=[}\]])")
_STRING_LITERAL = re.compile(r'"(?:[^"\\]|\\.)*"', re.DOTALL)
_QUOTES = str.maketrans({"\u201c": '"', "\u201d": '"', "\u2018": "'", "\u2019": "'", "\u00a0": " "})
_JS_LITERALS = {"true": "True", "false": "False", "null": "None"}


def clean_model_text(raw: str) -> str:
    text = (raw or "").strip()
    fenced = _FENCE.search(text)
    if fenced:
        text = fenced.group(1).strip()

    start, end = text.find("{"), text.rfind("}")
    if start >= 0:
        text = text[start : end + 1] if end > start else text[start:]

    text = text.translate(_QUOTES)
    text = _STRING_LITERAL.sub(lambda m: m.group(0).replace("\r", "\\r").replace("\n", "\\n"), text)
    return _TRAILING_COMMA.sub("", text)


def try_parse_object(raw: str) -> ParseResult:
    """Best-effort parse of a JSON object; never raises."""
    cleaned = clean_model_text(raw)
    try:
        obj = json.loads(cleaned)
    except json.JSONDecodeError as e:
        json_err = f"json: {e}"
    else:
        if isinstance(obj, dict):
            return ParseResult(data=obj, raw=raw, cleaned=cleaned)
        return ParseResult(data=None, raw=raw, cleaned=cleaned, error="top-level JSON value is not an object")

    pythonic = re.sub(r"\b(true|false|null)\b", lambda m: _JS_LITERALS[m.group(1)], cleaned)
    try:
        obj = ast.literal_eval(pythonic)
    except (ValueError, SyntaxError) as e:
        return ParseResult(data=None, raw=raw, cleaned=cleaned, error=f"{json_err} | literal_eval: {e}")
    if not isinstance(obj, dict):
        return ParseResult(data=None, raw=raw, cleaned=cleaned, error=f"{json_err} | literal is not a dict")
    # round-trip so only JSON types remain
    try:
        return ParseResult(data=json.loads(json.dumps(obj)), raw=raw, cleaned=cleaned)
    except TypeError as e:
        return ParseResult(data=None, raw=raw, cleaned=cleaned, error=f"{json_err} | not JSON-compatible: {e}")


def parse_object(raw: str) -> Dict[str, Any]:
    res = try_parse_object(raw)
    if res.data is None:
        raise ProviderError(res.error or "could not parse model output as a JSON object")
    return res.data
