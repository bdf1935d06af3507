from typing import List, Optional
from formbuilder.api.api_models.bases import BaseModel


class Question(BaseModel):
    Main_Question_ID: int
    Form_ID: int
    Main_Question: str
    QType_ID: int
    Required: bool
    Question_Type: str
    options: List[str]
    rows: List[str]


class Output(BaseModel):
    Form_ID: int
    Form_Name: str
    Description: Optional[str] = None
    questions: List[Question]
