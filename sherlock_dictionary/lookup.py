from __future__ import annotations

import os
import string
from typing import Tuple

import requests

API_URL = "https://api.dictionaryapi.dev/api/v2/entries/en/{}"
API_URL_ENV = "SHERLOCK_DICTIONARY_API_URL"


class InvalidTemplate(ValueError):
    """The URL template does not hold exactly one ``{}`` placeholder."""


def check_template(template: str) -> str:
    """Return ``template`` unchanged if the word can be substituted into it."""

    try:
        fields = [name for _, name, _, _ in string.Formatter().parse(template) if name is not None]
    except ValueError as exc:
        raise InvalidTemplate(f"bad URL template {template!r}: {exc}") from exc
    if fields != [""]:
        raise InvalidTemplate(f"URL template {template!r} needs exactly one '{{}}' placeholder")
    return template


def build_url(word: str, template: str | None = None) -> str:
    """Substitute ``word`` into the template.

    Without an explicit template the $SHERLOCK_DICTIONARY_API_URL override is
    used, falling back to ``API_URL``.
    """
    template = template or os.environ.get(API_URL_ENV) or API_URL
    return check_template(template).format(word)


def fetch(word: str, template: str | None = None) -> Tuple[int, str]:
    """Return (status code, body text) for one GET against the dictionary API.

    Transport failures are left to the caller as ``requests.RequestException``.
    """

    resp = requests.get(build_url(word, template))
    try:
        return resp.status_code, resp.text
    finally:
        resp.close()
