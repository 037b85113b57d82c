"""
Work out what the dictionary API actually sent back and turn it into an envelope.

The body is tried as a list of entries first (successful replies only), then
as an error object. Whatever matches neither is kept verbatim.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import List, Union

from pydantic import TypeAdapter, ValidationError

from sherlock_dictionary import formatting
from sherlock_dictionary.models import ApiError, DefinitionEntry, OutputEnvelope

NOT_FOUND_TITLE = "No Definitions Found"

_ENTRIES = TypeAdapter(List[DefinitionEntry])


@dataclass(frozen=True)
class Entries:
    entries: List[DefinitionEntry]


@dataclass(frozen=True)
class UpstreamError:
    error: ApiError


@dataclass(frozen=True)
class Unparseable:
    body: str
    reason: str


LookupResult = Union[Entries, UpstreamError, Unparseable]


def is_success(status: int) -> bool:
    """True for 2xx status codes."""
    return 200 <= status < 300


def classify(status: int, body: str) -> LookupResult:
    """Decide which of the three response shapes ``body`` has."""

    list_error = None
    if is_success(status):
        try:
            return Entries(_ENTRIES.validate_json(body))
        except ValidationError as exc:
            list_error = exc

    try:
        return UpstreamError(ApiError.model_validate_json(body))
    except ValidationError as exc:
        # For a 2xx reply the interesting failure is the list attempt.
        return Unparseable(body, str(list_error or exc))


def _log(*lines: str) -> None:
    for line in lines:
        print(line, file=sys.stderr)


def to_envelope(word: str, status: int, result: LookupResult) -> OutputEnvelope:
    """Pick the envelope for a classified reply and report problems on stderr."""
    ok = is_success(status)

    if isinstance(result, Entries):
        if not result.entries:
            _log(f"[INFO] No definition found for '{word}'.")
        return formatting.definitions_envelope(word, result.entries)

    if isinstance(result, UpstreamError):
        error = result.error
        if error.title == NOT_FOUND_TITLE:
            _log(f"[INFO] No definition found for '{word}'.")
            return formatting.no_definition_envelope()
        envelope = formatting.api_error_envelope(error, None if ok else status)
        _log(
            f"[WARN] {envelope.title}",
            f"Message: {error.message}",
            f"Resolution: {error.resolution}",
        )
        return envelope

    if ok:
        _log(
            f"[ERROR] Failed to parse API response for '{word}'.",
            f"Raw response body: {result.body}",
            f"Parsing error: {result.reason}",
        )
        return formatting.parse_error_envelope(word, result.body)

    _log(
        f"[ERROR] Error fetching definition for '{word}'.",
        f"HTTP Status: {status}",
        f"Failed to parse error response: {result.reason}",
        f"Raw response body: {result.body}",
    )
    return formatting.http_error_envelope(word, status, result.body)


def respond(word: str, status: int, body: str) -> OutputEnvelope:
    """Classify the raw reply and build its envelope."""
    return to_envelope(word, status, classify(status, body))
