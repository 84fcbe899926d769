from pydantic import BaseModel, Field
from typing import Optional, List

class TurnOut(BaseModel):
    id: str
    text: str
    speaker: str
    createdAt: str
    sentiment: Optional[str] = None
    suggestions: Optional[List[str]] = None

class SessionOut(BaseModel):
    id: str
    createdAt: str
    pending: bool
    turns: List[TurnOut]
    quickPrompts: List[str] = []

class MessageIn(BaseModel):
    message: str
    wait: bool = False  # block until the agent turn is appended

class SubmitResponse(BaseModel):
    accepted: bool
    session: SessionOut

class ClassifyIn(BaseModel):
    message: str

class ClassificationOut(BaseModel):
    category: str
    sentiment: str
    isCrisis: bool

class AlertOut(BaseModel):
    id: str
    sessionId: str
    turnId: str
    severity: str
    title: str
    message: str
    createdAt: str

class AlertsPage(BaseModel):
    limit: int = Field(ge=1)
    items: List[AlertOut]

class QuickPromptsOut(BaseModel):
    items: List[str]
