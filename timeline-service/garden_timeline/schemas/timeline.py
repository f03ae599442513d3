from pydantic import BaseModel
from typing import Dict, List, Literal, Optional

Language = Literal["en", "fa"]


class DocumentIn(BaseModel):
    id: Optional[int] = None
    title: Optional[str] = ""
    content: str = ""
    url: Optional[str] = ""

    class Config:
        # Allow extra fields without crashing
        extra = "ignore"


class TimelineRequest(BaseModel):
    documents: List[DocumentIn] = []
    language: Optional[Language] = None


class TimelinePointOut(BaseModel):
    year: int
    counts: Dict[str, int]


class TimelineResponse(BaseModel):
    language: str
    status: str
    topics: List[str]
    points: List[TimelinePointOut]
    min_year: Optional[int] = None
    max_year: Optional[int] = None


class TopicOut(BaseModel):
    label: str
    keywords: List[str]


class TopicsResponse(BaseModel):
    language: str
    topics: List[TopicOut]
