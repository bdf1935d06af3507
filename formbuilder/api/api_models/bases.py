from pydantic import BaseModel
from typing import Optional


class BaseInput(BaseModel):
    ...


class BaseOutput(BaseModel):
    message: Optional[str] = None


class ErrorOutput(BaseModel):
    error: str
