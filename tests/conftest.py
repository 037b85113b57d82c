"""
Shared fixtures: canned API payloads and a stand-in for requests.get.
"""
import json

import pytest
import requests


SERENDIPITY = [
    {
        "word": "serendipity",
        "phonetic": "/ˌsɛɹ.ənˈdɪp.ɪ.ti/",
        "phonetics": [{"text": "/ˌsɛɹ.ənˈdɪp.ɪ.ti/", "audio": ""}],
        "meanings": [
            {
                "partOfSpeech": "noun",
                "definitions": [
                    {"definition": "the occurrence of events by chance in a happy way"}
                ],
            }
        ],
    }
]

NOT_FOUND = {
    "title": "No Definitions Found",
    "message": "Sorry pal, we couldn't find definitions for the word you were looking for.",
    "resolution": "You can try the search again at later time or head to the web instead.",
}


class FakeResponse:
    def __init__(self, status_code, text):
        self.status_code = status_code
        self.text = text
        self.closed = False

    def close(self):
        self.closed = True


@pytest.fixture
def fake_api(monkeypatch):
    """Patch requests.get; call with (status, payload) to set the reply."""
    monkeypatch.delenv("SHERLOCK_DICTIONARY_API_URL", raising=False)
    calls = []

    def install(status, payload):
        text = payload if isinstance(payload, str) else json.dumps(payload)

        def fake_get(url, *args, **kwargs):
            calls.append(url)
            return FakeResponse(status, text)

        monkeypatch.setattr(requests, "get", fake_get)
        return calls

    return install
