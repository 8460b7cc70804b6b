"""
Module for turning raw LLM output into a structured AnalysisResult.

Models asked for JSON do not always return clean JSON: the object may come
wrapped in a markdown fence, surrounded by prose, written with single quotes
or trailing commas, or nested inside an ``analysis`` envelope. The parser
runs a fixed list of strategies in order and stops at the first one that
produces an object. Each strategy reports its own outcome instead of
raising, so a total failure can still say what went wrong.
"""

import json
import re
from typing import Any, Callable, List, NamedTuple, Optional, Union

from app.models.schemas import AnalysisResult, ParseFailure
from app.utils.logger import logging


# Envelopes like {"analysis": "..."} are unwrapped at most this many times
MAX_UNWRAP_DEPTH = 3

FENCE_OPEN = re.compile(r"^\s*```[\w-]*[ \t]*\r?\n?")
FENCE_CLOSE = re.compile(r"\r?\n?[ \t]*```\s*$")
# Both patterns match double-quoted strings first so their contents are left alone
DOUBLE_QUOTED = r'"(?:[^"\\]|\\.)*"'
UNQUOTED_KEY = re.compile(DOUBLE_QUOTED + r"|([{,]\s*)([A-Za-z_$][\w$]*)(\s*:)")
SINGLE_QUOTED = re.compile(DOUBLE_QUOTED + r"|'((?:[^'\\]|\\.)*)'")
CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
LINE_BREAKS = re.compile(r"[\r\n\t]+")
DOUBLED_ESCAPE = re.compile(r"\\\\([ntr])")
TRAILING_COMMA = re.compile(r",\s*([}\]])")
BRACE_SPAN = re.compile(r"\{[\s\S]*\}")

ParseOutcome = Union[AnalysisResult, ParseFailure]


class Attempt(NamedTuple):
    """Outcome of a single parsing strategy."""
    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _load(text: str) -> Attempt:
    try:
        return Attempt(value=json.loads(text))
    except (TypeError, ValueError, RecursionError) as e:
        return Attempt(error=str(e))


def strip_code_fence(text: str) -> str:
    """Remove a leading ```lang marker and a trailing ``` marker."""
    return FENCE_CLOSE.sub("", FENCE_OPEN.sub("", text, count=1), count=1).strip()


def _requote(match: re.Match) -> str:
    if match.group(1) is None:
        return match.group(0)
    body = match.group(1).replace("\\'", "'").replace('"', '\\"')
    return f'"{body}"'


def _quote_key(match: re.Match) -> str:
    if match.group(2) is None:
        return match.group(0)
    return f'{match.group(1)}"{match.group(2)}"{match.group(3)}'


def normalize_json_text(text: str) -> str:
    """
    Rewrite common near-JSON into JSON.

    Swaps single-quoted strings for double-quoted ones, quotes bare keys,
    drops control characters, collapses doubled newline/tab/carriage-return
    escapes and removes trailing commas.
    """
    text = SINGLE_QUOTED.sub(_requote, text)
    text = UNQUOTED_KEY.sub(_quote_key, text)
    text = CONTROL_CHARS.sub("", text)
    text = LINE_BREAKS.sub(" ", text)
    text = DOUBLED_ESCAPE.sub(r"\\\1", text)
    text = TRAILING_COMMA.sub(r"\1", text)
    return text


def _parse_direct(text: str) -> Attempt:
    return _load(text)


def _parse_fenced(text: str) -> Attempt:
    return _load(strip_code_fence(text))


def _parse_normalized(text: str) -> Attempt:
    return _load(normalize_json_text(strip_code_fence(text)))


def _parse_brace_span(text: str) -> Attempt:
    match = BRACE_SPAN.search(text)
    if not match:
        return Attempt(error="No JSON object found in response")

    span = match.group(0)
    attempt = _load(span)
    if attempt.ok:
        return attempt
    return _load(normalize_json_text(span))


STRATEGIES: List[Callable[[str], Attempt]] = [
    _parse_direct,
    _parse_fenced,
    _parse_normalized,
    _parse_brace_span,
]


def parse_json_text(text: str) -> Attempt:
    """
    Run every strategy in order until one yields a value.

    Returns:
        The first successful Attempt, or a failed one carrying the last error
    """
    last = Attempt(error="Empty response")
    if not text or not text.strip():
        return last

    for strategy in STRATEGIES:
        attempt = strategy(text)
        if attempt.ok:
            logging.debug(f"Model response parsed by {strategy.__name__}")
            return attempt
        last = attempt

    return last


def validate_analysis(candidate: Any, raw: str = "") -> ParseOutcome:
    """Check a parsed object has a usable topic, keyPoints and summary."""
    if not isinstance(candidate, dict):
        return ParseFailure(
            error=f"Expected a JSON object, got {type(candidate).__name__}",
            raw=raw,
        )

    topic = candidate.get("topic")
    if not isinstance(topic, str) or not topic.strip():
        return ParseFailure(error="Missing or invalid field: topic", raw=raw, field="topic")

    key_points = candidate.get("keyPoints")
    if not isinstance(key_points, list):
        return ParseFailure(error="Missing or invalid field: keyPoints", raw=raw, field="keyPoints")

    summary = candidate.get("summary")
    if not isinstance(summary, str) or not summary.strip():
        return ParseFailure(error="Missing or invalid field: summary", raw=raw, field="summary")

    return AnalysisResult(topic=topic, keyPoints=key_points, summary=summary)


def _raw_text(raw: Any) -> str:
    if isinstance(raw, str):
        return raw
    try:
        return json.dumps(raw, indent=2, ensure_ascii=False, default=str)
    except (TypeError, ValueError, RecursionError):
        return str(raw)


def parse_analysis(raw: Any, _depth: int = 0) -> ParseOutcome:
    """
    Convert raw model output into an AnalysisResult.

    Args:
        raw: Text returned by the model, or an object such as the
            ``{"analysis": ...}`` payload of the analyze endpoint

    Returns:
        AnalysisResult on success, otherwise a ParseFailure with a readable
        reason and the original raw text
    """
    raw_text = _raw_text(raw)

    if raw is None:
        return ParseFailure(error="No analysis data available", raw="")

    if isinstance(raw, dict):
        nested = raw.get("analysis")
        if isinstance(nested, dict):
            return validate_analysis(nested, raw_text)
        if isinstance(nested, str):
            if _depth >= MAX_UNWRAP_DEPTH:
                return ParseFailure(error="Analysis nested too deeply", raw=raw_text)
            return parse_analysis(nested, _depth + 1)
        return validate_analysis(raw, raw_text)

    if not isinstance(raw, str):
        return ParseFailure(
            error=f"Unsupported response type: {type(raw).__name__}",
            raw=raw_text,
        )

    attempt = parse_json_text(raw)
    if not attempt.ok:
        logging.warning(f"Could not parse model response: {attempt.error}")
        return ParseFailure(error=attempt.error, raw=raw)

    value = attempt.value
    if isinstance(value, dict) and "analysis" in value and _depth < MAX_UNWRAP_DEPTH:
        nested = value["analysis"]
        if isinstance(nested, dict):
            return validate_analysis(nested, raw)
        if isinstance(nested, str):
            return parse_analysis(nested, _depth + 1)

    outcome = validate_analysis(value, raw)
    if isinstance(outcome, ParseFailure):
        logging.warning(f"Model response failed validation: {outcome.error}")
    return outcome
