"""
Pydantic schemas for the dictionary API payloads and the launcher envelope.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Upstream(BaseModel):
    model_config = ConfigDict(frozen=True)


class License(_Upstream):
    name: Optional[str] = None
    url: Optional[str] = None


class Phonetic(_Upstream):
    text: Optional[str] = None
    audio: Optional[str] = None
    source_url: Optional[str] = Field(None, alias="sourceUrl")
    license: Optional[License] = None


class Definition(_Upstream):
    """A single sense of a word."""
    definition: str
    example: Optional[str] = None
    synonyms: Optional[List[str]] = None
    antonyms: Optional[List[str]] = None


class Meaning(_Upstream):
    """Definitions grouped under one part of speech."""
    part_of_speech: str = Field(..., alias="partOfSpeech")
    definitions: List[Definition]
    synonyms: Optional[List[str]] = None
    antonyms: Optional[List[str]] = None


class DefinitionEntry(_Upstream):
    """One element of the list returned for a successful lookup."""
    word: str
    phonetic: Optional[str] = None
    phonetics: List[Phonetic]
    meanings: List[Meaning]
    source_urls: Optional[List[str]] = Field(None, alias="sourceUrls")
    origin: Optional[str] = None
    license: Optional[License] = None


class ApiError(_Upstream):
    """Error object the API sends back, usually alongside a 404."""
    title: str
    message: str
    resolution: str


class Action(BaseModel):
    """Clipboard copy entry shown by the launcher."""
    name: str
    exec: str
    icon: str
    method: str = "copy"
    exit: bool = True


class OutputEnvelope(BaseModel):
    title: str
    content: str = ""
    next_content: str = ""
    actions: List[Action] = Field(default_factory=list)

    @classmethod
    def of(cls, title: str, content: str = "", actions: Optional[List[Action]] = None) -> "OutputEnvelope":
        """Build an envelope whose next page repeats the content."""
        return cls(title=title, content=content, next_content=content, actions=actions or [])

    def to_json(self) -> str:
        """Serialize as the single line printed for the launcher."""
        return self.model_dump_json()
