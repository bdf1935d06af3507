"""Form editor state

The editor keeps the whole form being composed in a FormDraft. Every edit is
a pure function taking a draft and returning a new one, the draft passed in
is never mutated. Questions are addressed by their editor id, operations on
an id that is not in the draft leave it unchanged.

At most one question is in editing mode at a time, the rest are previewed.
"""
from typing import Callable, Dict, List, Union

from pydantic import BaseModel, Field

from formbuilder.modules.question_kinds import QuestionKind, build_variant, has_options, has_rows
from formbuilder.utils.clean_entries import clean_entries


class EditorQuestion(BaseModel):
    id: str
    question: str = ""
    type: str = QuestionKind.SHORT.value
    required: bool = False
    options: List[str] = Field(default_factory=lambda: [""])
    rows: List[str] = Field(default_factory=lambda: [""])
    isEditing: bool = False


class FormDraft(BaseModel):
    title: str = ""
    description: str = ""
    questions: List[EditorQuestion] = Field(default_factory=lambda: [EditorQuestion(id="1")])


def _replace_question(draft: FormDraft, question_id: str, **changes) -> FormDraft:
    questions = [
        q.model_copy(update=changes) if q.id == question_id else q
        for q in draft.questions
    ]
    return draft.model_copy(update={"questions": questions})


def _find(draft: FormDraft, question_id: str) -> Union[EditorQuestion, None]:
    for q in draft.questions:
        if q.id == question_id:
            return q
    return None


def set_title(draft: FormDraft, title: str) -> FormDraft:
    return draft.model_copy(update={"title": title})


def set_description(draft: FormDraft, description: str) -> FormDraft:
    return draft.model_copy(update={"description": description})


def add_question(draft: FormDraft) -> FormDraft:
    """Appends a blank short answer question in editing mode"""
    ids = [int(q.id) for q in draft.questions if q.id.isdigit()]
    new_id = str(max(ids) + 1) if ids else "1"

    questions = [q.model_copy(update={"isEditing": False}) for q in draft.questions]
    questions.append(EditorQuestion(id=new_id, isEditing=True))
    return draft.model_copy(update={"questions": questions})


def delete_question(draft: FormDraft, question_id: str) -> FormDraft:
    questions = [q for q in draft.questions if q.id != question_id]
    return draft.model_copy(update={"questions": questions})


def select_question(draft: FormDraft, question_id: str) -> FormDraft:
    """Puts one question in editing mode and every other one in preview"""
    questions = [
        q.model_copy(update={"isEditing": q.id == question_id})
        for q in draft.questions
    ]
    return draft.model_copy(update={"questions": questions})


def collapse_all(draft: FormDraft) -> FormDraft:
    questions = [q.model_copy(update={"isEditing": False}) for q in draft.questions]
    return draft.model_copy(update={"questions": questions})


def change_question_text(draft: FormDraft, question_id: str, text: str) -> FormDraft:
    return _replace_question(draft, question_id, question=text)


def change_type(draft: FormDraft, question_id: str, new_type: str) -> FormDraft:
    """Switches a question to another kind

    Options survive a switch between option kinds (multiple, checkbox,
    dropdown, grid). Any other switch resets them to one blank option for
    option kinds and to nothing for the rest. Rows are only kept while the
    question stays a grid; entering grid starts with one blank row.

    Raises:
        ValueError: new_type is not a known question kind
    """
    new_type = QuestionKind(new_type).value
    question = _find(draft, question_id)
    if question is None:
        return draft

    if has_options(question.type) and has_options(new_type):
        options = question.options
    elif has_options(new_type):
        options = [""]
    else:
        options = []

    if has_rows(new_type):
        rows = question.rows if has_rows(question.type) else [""]
    else:
        rows = []

    return _replace_question(draft, question_id, type=new_type, options=options, rows=rows)


def change_option(draft: FormDraft, question_id: str, index: int, value: str) -> FormDraft:
    question = _find(draft, question_id)
    if question is None:
        return draft

    options = [value if i == index else opt for i, opt in enumerate(question.options)]
    return _replace_question(draft, question_id, options=options)


def add_option(draft: FormDraft, question_id: str) -> FormDraft:
    question = _find(draft, question_id)
    if question is None:
        return draft

    return _replace_question(draft, question_id, options=question.options + [""])


def remove_option(draft: FormDraft, question_id: str, index: int) -> FormDraft:
    question = _find(draft, question_id)
    # the last option cannot be removed
    if question is None or len(question.options) <= 1:
        return draft

    options = [opt for i, opt in enumerate(question.options) if i != index]
    return _replace_question(draft, question_id, options=options)


def change_row(draft: FormDraft, question_id: str, index: int, value: str) -> FormDraft:
    question = _find(draft, question_id)
    if question is None or not has_rows(question.type):
        return draft

    rows = [value if i == index else row for i, row in enumerate(question.rows)]
    return _replace_question(draft, question_id, rows=rows)


def add_row(draft: FormDraft, question_id: str) -> FormDraft:
    question = _find(draft, question_id)
    if question is None or not has_rows(question.type):
        return draft

    return _replace_question(draft, question_id, rows=question.rows + [""])


def remove_row(draft: FormDraft, question_id: str, index: int) -> FormDraft:
    question = _find(draft, question_id)
    if question is None or not has_rows(question.type) or len(question.rows) <= 1:
        return draft

    rows = [row for i, row in enumerate(question.rows) if i != index]
    return _replace_question(draft, question_id, rows=rows)


def toggle_required(draft: FormDraft, question_id: str) -> FormDraft:
    question = _find(draft, question_id)
    if question is None:
        return draft

    return _replace_question(draft, question_id, required=not question.required)


def reorder(draft: FormDraft, source_index: int, destination_index: int = None) -> FormDraft:
    """Moves the question at source_index to destination_index

    A drop outside the list arrives without a destination and changes nothing,
    as does a source index that is not in the list.
    """
    if destination_index is None or source_index not in range(len(draft.questions)):
        return draft

    questions = list(draft.questions)
    moved = questions.pop(source_index)
    questions.insert(destination_index, moved)
    return draft.model_copy(update={"questions": questions})


def to_submission(draft: FormDraft) -> dict:
    """Builds the body posted to create the form

    Texts are trimmed, blank options and rows are dropped and each question
    only carries the fields its kind uses.

    Args:
        draft (FormDraft): Draft being submitted

    Returns:
        dict: title, optional description and questions
    """

    body = {
        "title": draft.title.strip(),
        "questions": [
            build_variant(
                question=q.question.strip(),
                kind=q.type,
                required=q.required,
                options=clean_entries(q.options),
                rows=clean_entries(q.rows)
            ).model_dump()
            for q in draft.questions
        ]
    }

    if draft.description.strip():
        body["description"] = draft.description.strip()

    return body


ACTIONS: Dict[str, Callable[..., FormDraft]] = {
    "set_title": set_title,
    "set_description": set_description,
    "add_question": add_question,
    "delete_question": delete_question,
    "select_question": select_question,
    "collapse_all": collapse_all,
    "change_question_text": change_question_text,
    "change_type": change_type,
    "change_option": change_option,
    "add_option": add_option,
    "remove_option": remove_option,
    "change_row": change_row,
    "add_row": add_row,
    "remove_row": remove_row,
    "toggle_required": toggle_required,
    "reorder": reorder,
}


def reduce(draft: FormDraft, action: dict) -> FormDraft:
    """Applies one action to a draft

    Args:
        draft (FormDraft): Current draft
        action (dict): {"type": <name in ACTIONS>, ...keyword arguments of that operation}

    Raises:
        ValueError: the action type is unknown

    Returns:
        FormDraft: New draft
    """

    payload = dict(action)
    action_type = payload.pop("type", None)
    handler = ACTIONS.get(action_type)
    if handler is None:
        raise ValueError(f"Unknown editor action: {action_type}")

    return handler(draft, **payload)
