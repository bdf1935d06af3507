from enum import Enum
from typing import List, Literal, Union

from pydantic import BaseModel


class QuestionKind(str, Enum):
    SHORT = "short"
    PARAGRAPH = "paragraph"
    MULTIPLE = "multiple"
    CHECKBOX = "checkbox"
    DROPDOWN = "dropdown"
    GRID = "grid"
    DATE = "date"


# kinds that carry a list of options (grid uses them as column labels)
OPTION_KINDS = (
    QuestionKind.MULTIPLE,
    QuestionKind.CHECKBOX,
    QuestionKind.DROPDOWN,
    QuestionKind.GRID
)


def has_options(kind: str) -> bool:
    return kind in [k.value for k in OPTION_KINDS]


def has_rows(kind: str) -> bool:
    return kind == QuestionKind.GRID.value


class TextQuestion(BaseModel):
    question: str
    type: Literal["short", "paragraph", "date"]
    required: bool = False


class ChoiceQuestion(BaseModel):
    question: str
    type: Literal["multiple", "checkbox", "dropdown"]
    required: bool = False
    options: List[str]


class GridQuestion(BaseModel):
    question: str
    type: Literal["grid"]
    required: bool = False
    options: List[str]
    rows: List[str]


QuestionVariant = Union[TextQuestion, ChoiceQuestion, GridQuestion]


def build_variant(question: str, kind: str, required: bool = False, options: List[str] = None, rows: List[str] = None) -> QuestionVariant:
    """Function to build the variant for a question kind

    Only the fields the kind needs are kept, options handed to a short
    question or rows handed to a dropdown are dropped.

    Args:
        question (str): Question text
        kind (str): One of the QuestionKind values
        required (bool, optional): Whether an answer is required. Defaults to False.
        options (List[str], optional): Option labels or grid columns. Defaults to None.
        rows (List[str], optional): Grid row labels. Defaults to None.

    Raises:
        ValueError: kind is not a known question kind

    Returns:
        QuestionVariant: Model for the kind
    """

    kind = QuestionKind(kind)
    if kind == QuestionKind.GRID:
        return GridQuestion(question=question, type=kind.value, required=required, options=options or [], rows=rows or [])
    if kind in OPTION_KINDS:
        return ChoiceQuestion(question=question, type=kind.value, required=required, options=options or [])
    return TextQuestion(question=question, type=kind.value, required=required)
