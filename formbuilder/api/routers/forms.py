from fastapi import APIRouter

from formbuilder import log
from formbuilder.modules.form_builder import form_builder, response_builder
from formbuilder.modules.exceptions import FormBuilderError, NotFound, ValidationError
from formbuilder.api.lib.base_responses import successful_response, server_error, user_error, not_found
from formbuilder.api.api_models.bases import ErrorOutput
from formbuilder.api.api_models.forms import create_form, form_load, submit_response
from formbuilder.database.sql.form_functions import get_form


router = APIRouter(
    prefix="/api/forms",
    tags=["Forms"],
    responses={404: {"description": "Details not found", "model": ErrorOutput}}
)


@router.post(
    "",
    description="Route to create a form with its questions",
    status_code=201,
    response_model=create_form.Output,
    responses={400: {"model": ErrorOutput}, 500: {"model": ErrorOutput}}
)
async def create_form_route(content: create_form.Input):
    try:
        form_id = await form_builder(form=content)
        return successful_response(
            status_code=201,
            message="Form created successfully",
            payload={"id": form_id}
        )

    except ValidationError as err:
        return user_error(message=err.message)

    except FormBuilderError as err:
        log.error(f"Failed to create form: {err.message}")
        return server_error(message=err.message or "Failed to create form")

    except Exception:
        log.exception("Failed to create form")
        return server_error(message="Failed to create form")


@router.get(
    "/{form_id}",
    description="Route to load a form with its questions, options and rows",
    response_model=form_load.Output,
    responses={500: {"model": ErrorOutput}}
)
async def load_form(form_id: int):
    try:
        form = await get_form(form_id=form_id)
        return successful_response(payload=form)

    except NotFound as err:
        return not_found(message=err.message)

    except Exception:
        log.exception(f"Failed to fetch form {form_id}")
        return server_error(message="Failed to fetch form")


@router.post(
    "/{form_id}/responses",
    description="Route to submit a response to a form",
    status_code=201,
    response_model=submit_response.Output,
    responses={400: {"model": ErrorOutput}, 500: {"model": ErrorOutput}}
)
async def submit_response_route(form_id: int, content: submit_response.Input):
    try:
        response_id = await response_builder(form_id=form_id, response=content)
        return successful_response(
            status_code=201,
            message="Response submitted successfully",
            payload={"responseId": response_id}
        )

    except ValidationError as err:
        return user_error(message=err.message)

    except Exception:
        log.exception(f"Failed to submit response for form {form_id}")
        return server_error(message="Failed to submit response")
