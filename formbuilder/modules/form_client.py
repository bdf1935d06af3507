import os
from typing import List

import requests

from formbuilder import log
from formbuilder.modules.exceptions import FormSubmissionError
from formbuilder.modules.form_editor import FormDraft, to_submission

FORMS_API_URL = os.getenv("FORMS_API_URL", "http://localhost:3001")


def _raise_for_error(response: requests.Response, expected: int, default_message: str):
    if response.status_code == expected:
        return

    try:
        message = response.json().get("error")
    except ValueError:
        message = None

    raise FormSubmissionError(message or default_message, status_code=response.status_code)


def submit_form_draft(draft: FormDraft, base_url: str = None, timeout: int = 10) -> int:
    """Function to post an editor draft to the forms api

    Args:
        draft (FormDraft): Draft built in the editor
        base_url (str, optional): Root url of the api. Defaults to FORMS_API_URL.
        timeout (int, optional): Seconds to wait for the api. Defaults to 10.

    Raises:
        FormSubmissionError: The api did not create the form

    Returns:
        int: Id of the new form
    """

    response = requests.post(
        url=f"{base_url or FORMS_API_URL}/api/forms",
        json=to_submission(draft),
        timeout=timeout
    )
    _raise_for_error(response, 201, "Failed to create form")

    form_id = response.json()["id"]
    log.info(f"form draft submitted as form {form_id}")
    return form_id


def fetch_form(form_id: int, base_url: str = None, timeout: int = 10) -> dict:
    response = requests.get(
        url=f"{base_url or FORMS_API_URL}/api/forms/{form_id}",
        timeout=timeout
    )
    _raise_for_error(response, 200, "Failed to fetch form")
    return response.json()


def submit_answers(form_id: int, answers: List[dict], student_id: str = None, base_url: str = None, timeout: int = 10) -> int:
    """Function to post a respondent's answers to a form

    Args:
        form_id (int): id of the form being answered
        answers (List[dict]): answers with questionId and choiceId, textAnswer or gridAnswers
        student_id (str, optional): id of the respondent. Defaults to None.
        base_url (str, optional): Root url of the api. Defaults to FORMS_API_URL.
        timeout (int, optional): Seconds to wait for the api. Defaults to 10.

    Raises:
        FormSubmissionError: The api did not record the response

    Returns:
        int: Id of the new response
    """

    body = {"answers": answers}
    if student_id:
        body["studentId"] = student_id

    response = requests.post(
        url=f"{base_url or FORMS_API_URL}/api/forms/{form_id}/responses",
        json=body,
        timeout=timeout
    )
    _raise_for_error(response, 201, "Failed to submit response")
    return response.json()["responseId"]
