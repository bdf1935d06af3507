from typing import List, Union
import asyncpg

from formbuilder import log
from formbuilder.database.sql import get_connection, acquire_connection
from formbuilder.modules.exceptions import InvalidQuestionType, NotFound, PersistenceError


INSERT_FORM_QUERY = """
    INSERT INTO forms (form_name, description)
    VALUES ($1, $2)
    RETURNING form_id;
"""

SELECT_QUESTION_TYPE_QUERY = """
    SELECT qtype_id FROM question_type WHERE question_type = $1;
"""

INSERT_QUESTION_QUERY = """
    INSERT INTO main_questions (form_id, main_question, qtype_id, required)
    VALUES ($1, $2, $3, $4)
    RETURNING main_question_id;
"""

INSERT_CHOICE_QUERY = """
    INSERT INTO choices (main_question_id, choice_text)
    VALUES ($1, $2);
"""

INSERT_SUB_QUESTION_QUERY = """
    INSERT INTO sub_question (main_question_id, sub_question)
    VALUES ($1, $2);
"""

SELECT_FORM_QUERY = """
    SELECT
        form_id,
        form_name,
        description
    FROM forms WHERE form_id = $1;
"""

SELECT_QUESTIONS_QUERY = """
    SELECT
        mq.main_question_id,
        mq.form_id,
        mq.main_question,
        mq.qtype_id,
        mq.required,
        qt.question_type
    FROM main_questions mq
    JOIN question_type qt ON mq.qtype_id = qt.qtype_id
    WHERE mq.form_id = $1
    ORDER BY mq.main_question_id;
"""

SELECT_CHOICES_QUERY = """
    SELECT choice_text FROM choices
    WHERE main_question_id = $1
    ORDER BY choice_id;
"""

SELECT_SUB_QUESTIONS_QUERY = """
    SELECT sub_question FROM sub_question
    WHERE main_question_id = $1
    ORDER BY sub_question_id;
"""

INSERT_RESPONSE_QUERY = """
    INSERT INTO responses (form_id, student_id)
    VALUES ($1, $2)
    RETURNING response_id;
"""

INSERT_ANSWER_QUERY = """
    INSERT INTO answers (response_id, main_question_id, choice_id, text_answer)
    VALUES ($1, $2, $3, $4);
"""

INSERT_GRID_ANSWER_QUERY = """
    INSERT INTO grid_answer (response_id, main_question_id, sub_question_id, choice_id)
    VALUES ($1, $2, $3, $4);
"""


async def submit_form(title: str, description: Union[str, None], questions: List[dict]) -> int:
    """Function to create a form with its questions, choices and sub questions

    Everything runs in a single transaction, an unknown question type or any
    rejected insert leaves no row behind for this form.

    Args:
        title (str): Trimmed name of the form
        description (Union[str, None]): Trimmed description or None
        questions (List[dict]): Cleaned questions with question, type, required, options and rows keys

    Raises:
        InvalidQuestionType: A question type is not in the question_type table
        PersistenceError: The database rejected one of the inserts

    Returns:
        int: Id of the new form
    """

    try:
        db_pool = await get_connection()
        async with acquire_connection(db_pool) as conn:
            async with conn.transaction():
                form_id = await conn.fetchval(INSERT_FORM_QUERY, title, description)

                for question in questions:
                    type_id = await conn.fetchval(SELECT_QUESTION_TYPE_QUERY, question["type"])
                    if type_id is None:
                        raise InvalidQuestionType(question["type"])

                    question_id = await conn.fetchval(
                        INSERT_QUESTION_QUERY,
                        form_id,
                        question["question"],
                        type_id,
                        question["required"]
                    )

                    if question["options"]:
                        await conn.executemany(
                            INSERT_CHOICE_QUERY,
                            [(question_id, option) for option in question["options"]]
                        )

                    if question["rows"]:
                        await conn.executemany(
                            INSERT_SUB_QUESTION_QUERY,
                            [(question_id, row) for row in question["rows"]]
                        )

    except asyncpg.PostgresError as err:
        log.exception(f"An error occured while creating form {title}")
        raise PersistenceError(str(err)) from err

    log.info(f"created form {form_id} with {len(questions)} questions")
    return form_id


async def get_form(form_id: int) -> dict:
    """Function to get a form with its questions, options and rows

    Args:
        form_id (int): id of the form to return

    Raises:
        NotFound: No form exists with this id

    Returns:
        dict: form columns plus a questions list ordered by question id
    """

    db_pool = await get_connection()
    async with acquire_connection(db_pool) as conn:
        form = await conn.fetchrow(SELECT_FORM_QUERY, form_id)
        if not form:
            raise NotFound("Form not found")

        questions = []
        for question in await conn.fetch(SELECT_QUESTIONS_QUERY, form_id):
            options = await conn.fetch(SELECT_CHOICES_QUERY, question["main_question_id"])
            rows = await conn.fetch(SELECT_SUB_QUESTIONS_QUERY, question["main_question_id"])
            questions.append({
                "Main_Question_ID": question["main_question_id"],
                "Form_ID": question["form_id"],
                "Main_Question": question["main_question"],
                "QType_ID": question["qtype_id"],
                "Required": question["required"],
                "Question_Type": question["question_type"],
                "options": [option["choice_text"] for option in options],
                "rows": [row["sub_question"] for row in rows]
            })

    return {
        "Form_ID": form["form_id"],
        "Form_Name": form["form_name"],
        "Description": form["description"],
        "questions": questions
    }


async def submit_response(form_id: int, student_id: Union[str, None], answers: List[dict]) -> int:
    """Function to record one respondent's answers to a form

    Args:
        form_id (int): id of the form being answered
        student_id (Union[str, None]): optional id of the respondent
        answers (List[dict]): answers with questionId, choiceId, textAnswer and gridAnswers keys

    Raises:
        PersistenceError: The database rejected one of the inserts, nothing was recorded

    Returns:
        int: Id of the new response
    """

    try:
        db_pool = await get_connection()
        async with acquire_connection(db_pool) as conn:
            async with conn.transaction():
                response_id = await conn.fetchval(INSERT_RESPONSE_QUERY, form_id, student_id)

                for answer in answers:
                    if answer.get("choiceId") or answer.get("textAnswer"):
                        await conn.execute(
                            INSERT_ANSWER_QUERY,
                            response_id,
                            answer["questionId"],
                            answer.get("choiceId") or None,
                            answer.get("textAnswer") or None
                        )

                    for grid_answer in answer.get("gridAnswers") or []:
                        await conn.execute(
                            INSERT_GRID_ANSWER_QUERY,
                            response_id,
                            answer["questionId"],
                            grid_answer["subQuestionId"],
                            grid_answer["choiceId"]
                        )

    except asyncpg.PostgresError as err:
        log.exception(f"An error occured while submitting a response for form {form_id}")
        raise PersistenceError(str(err)) from err

    log.info(f"recorded response {response_id} for form {form_id}")
    return response_id
