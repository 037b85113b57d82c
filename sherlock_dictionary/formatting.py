"""
Rendering of dictionary entries into launcher markup and copy actions.
"""
from __future__ import annotations

import re
from typing import Iterable, List, Optional

from sherlock_dictionary.models import Action, ApiError, Definition, DefinitionEntry, OutputEnvelope

COPY_ICON = "edit-copy"
NO_DEFINITION_TITLE = "No definition found"

BLOCK_OPEN = '<span font_desc="monospace">\n'
BLOCK_FOOTER = "────────────\n"
BLOCK_CLOSE = "</span>"

_PARENS = re.compile(r"\([^()]*\)")


def shorten_label(text: str) -> str:
    """Turn a definition into a short action label.

    Parenthesized asides are dropped, the text is cut at the first comma and
    trailing periods are removed. Applying it twice gives the same result.
    """

    label = text
    while True:
        stripped = _PARENS.sub("", label)
        if stripped == label:
            break
        label = stripped
    label = label.split(",", 1)[0]
    label = " ".join(label.split()).rstrip(". ")
    if not label:
        return " ".join(text.split())
    return label


def _joined(words: Optional[List[str]]) -> str:
    return ", ".join(words) if words else ""


def format_entry(entry: DefinitionEntry) -> str:
    """Render one entry as a monospace block."""

    parts = [BLOCK_OPEN]
    for meaning in entry.meanings:
        parts.append(f"─── <b><i>{meaning.part_of_speech}</i></b> ───\n\n")
        for i, definition in enumerate(meaning.definitions, 1):
            parts.append(f" {i:>2}. {definition.definition}\n")
            if definition.example is not None:
                parts.append(f'     Example: "{definition.example}"\n')
            if definition.synonyms:
                parts.append(f"     Synonyms: {_joined(definition.synonyms)}\n")
            if definition.antonyms:
                parts.append(f"     Antonyms: {_joined(definition.antonyms)}\n")
            parts.append("\n")
    parts.append(BLOCK_FOOTER)
    parts.append(BLOCK_CLOSE)
    return "".join(parts)


def copy_action(definition: Definition) -> Action:
    """Action copying the definition with its example and word lists."""
    fields = [
        definition.definition,
        definition.example,
        _joined(definition.synonyms),
        _joined(definition.antonyms),
    ]
    return Action(
        name=shorten_label(definition.definition),
        exec="\n".join(f for f in fields if f),
        icon=COPY_ICON,
    )


def entry_actions(entries: Iterable[DefinitionEntry]) -> List[Action]:
    """One copy action per definition, in reply order."""
    return [
        copy_action(definition)
        for entry in entries
        for meaning in entry.meanings
        for definition in meaning.definitions
    ]


def definitions_envelope(word: str, entries: List[DefinitionEntry]) -> OutputEnvelope:
    """Envelope for a successful lookup; empty lists mean no definition."""
    if not entries:
        return no_definition_envelope()
    content = "".join(format_entry(entry) for entry in entries)
    return OutputEnvelope.of(f'Definition of "{word}"', content, entry_actions(entries))


def no_definition_envelope() -> OutputEnvelope:
    return OutputEnvelope.of(NO_DEFINITION_TITLE)


def api_error_envelope(error: ApiError, status: Optional[int] = None) -> OutputEnvelope:
    """Envelope for a structured API error; ``status`` is set for non-2xx replies."""

    if status is None:
        title = f"API Error: {error.title}"
    else:
        title = f"API Error (Status {status}): {error.title}"
    return OutputEnvelope.of(title, f"Message: {error.message}\nResolution: {error.resolution}")


def parse_error_envelope(word: str, body: str) -> OutputEnvelope:
    return OutputEnvelope.of(
        f"Parsing Error for '{word}'",
        f"Failed to parse API response. Raw body: {body}",
    )


def http_error_envelope(word: str, status: int, body: str) -> OutputEnvelope:
    return OutputEnvelope.of(
        f"HTTP Error (Status {status}) for '{word}'",
        f"Failed to parse error response. Raw body: {body}",
    )
