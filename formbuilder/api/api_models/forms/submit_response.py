from typing import List, Optional, Union
from formbuilder.api.api_models.bases import BaseOutput, BaseInput, BaseModel


class GridAnswer(BaseModel):
    subQuestionId: int
    choiceId: int


class Answer(BaseModel):
    questionId: int
    choiceId: Optional[int] = None
    textAnswer: Optional[str] = None
    gridAnswers: Optional[List[GridAnswer]] = None


class Output(BaseOutput):
    responseId: int


class Input(BaseInput):
    studentId: Optional[Union[str, int]] = None
    answers: Optional[List[Answer]] = None
