from formbuilder.api.api_models.forms import create_form, submit_response
from formbuilder.database.sql.form_functions import submit_form, submit_response as save_response
from formbuilder.modules.exceptions import ValidationError
from formbuilder.utils.clean_entries import clean_entries


async def form_builder(form: create_form.Input) -> int:
    """Function to build a form

    Args:
        form (create_form.Input): Model of the form with its questions

    Raises:
        ValidationError: title, questions or a question text is missing

    Returns:
        int: Id of the new form
    """

    if not form.title or not form.title.strip():
        raise ValidationError("Form title is required")

    if not form.questions:
        raise ValidationError("At least one question is required")

    questions = []
    for idx, question in enumerate(form.questions):
        if not question.question or not question.question.strip():
            raise ValidationError(f"Question {idx + 1} must have text")

        questions.append({
            "question": question.question.strip(),
            "type": question.type,
            "required": bool(question.required),
            "options": clean_entries(question.options),
            "rows": clean_entries(question.rows)
        })

    description = form.description.strip() if form.description else None

    return await submit_form(
        title=form.title.strip(),
        description=description or None,
        questions=questions
    )


async def response_builder(form_id: int, response: submit_response.Input) -> int:
    """Function to record a response to a form

    Answers with neither a direct answer nor grid answers are skipped.

    Args:
        form_id (int): id of the form being answered
        response (submit_response.Input): Model of the response

    Raises:
        ValidationError: answers is missing

    Returns:
        int: Id of the new response
    """

    if response.answers is None:
        raise ValidationError("Answers array is required")

    student_id = str(response.studentId) if response.studentId else None

    return await save_response(
        form_id=form_id,
        student_id=student_id,
        answers=[answer.model_dump() for answer in response.answers]
    )
