from typing import List, Optional
from formbuilder.api.api_models.bases import BaseOutput, BaseInput, BaseModel


class Question(BaseModel):
    question: Optional[str] = None
    type: str
    required: Optional[bool] = False
    options: Optional[List[Optional[str]]] = None
    rows: Optional[List[Optional[str]]] = None


class Output(BaseOutput):
    id: int


class Input(BaseInput):
    title: Optional[str] = None
    description: Optional[str] = None
    questions: Optional[List[Question]] = None
