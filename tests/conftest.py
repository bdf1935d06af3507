# tests/conftest.py
"""
In-memory stand in for the asyncpg pool used by the forms api.

FakeDatabase keeps one list of rows per table and understands exactly the
statements declared in formbuilder.database.sql.form_functions. Foreign keys
are checked on insert and raise asyncpg's ForeignKeyViolationError, and
conn.transaction() restores every table when its block raises, so rollback
behaviour can be asserted on the stored rows.
"""
import copy
import os

os.environ.setdefault("APP_NAME", "form-builder-test")
os.environ.setdefault("APP_VERSION", "0.0.0-test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import asyncpg
import pytest
from fastapi.testclient import TestClient

from formbuilder.database import sql
from formbuilder.database.sql import form_functions as q
from formbuilder.api.app import app

QUESTION_TYPES = ["short", "paragraph", "multiple", "checkbox", "dropdown", "grid", "date"]


class FakeDatabase:
    def __init__(self):
        self.tables = {
            "forms": [],
            "question_type": [
                {"qtype_id": idx + 1, "question_type": name}
                for idx, name in enumerate(QUESTION_TYPES)
            ],
            "main_questions": [],
            "choices": [],
            "sub_question": [],
            "responses": [],
            "answers": [],
            "grid_answer": [],
        }
        # sequences are not rolled back, same as postgres
        self.sequences = {name: len(rows) for name, rows in self.tables.items()}
        self.broken = False
        self.statements = []

    def count(self, table: str) -> int:
        return len(self.tables[table])

    def rows(self, table: str) -> list:
        return self.tables[table]

    def _insert(self, table: str, id_column: str, row: dict) -> int:
        self.sequences[table] += 1
        row = {id_column: self.sequences[table], **row}
        self.tables[table].append(row)
        return row[id_column]

    def _require(self, table: str, id_column: str, value):
        if not any(row[id_column] == value for row in self.tables[table]):
            raise asyncpg.exceptions.ForeignKeyViolationError(
                f'insert violates foreign key constraint: key ({id_column})=({value}) is not present in table "{table}"'
            )

    def run(self, query: str, args: tuple):
        if self.broken:
            raise ConnectionResetError("connection was closed in the middle of operation")
        self.statements.append(query)

        if query == q.INSERT_FORM_QUERY:
            name, description = args
            return self._insert("forms", "form_id", {"form_name": name, "description": description})

        if query == q.SELECT_QUESTION_TYPE_QUERY:
            for row in self.tables["question_type"]:
                if row["question_type"] == args[0]:
                    return [{"qtype_id": row["qtype_id"]}]
            return []

        if query == q.INSERT_QUESTION_QUERY:
            form_id, text, type_id, required = args
            self._require("forms", "form_id", form_id)
            self._require("question_type", "qtype_id", type_id)
            return self._insert("main_questions", "main_question_id", {
                "form_id": form_id, "main_question": text, "qtype_id": type_id, "required": required
            })

        if query == q.INSERT_CHOICE_QUERY:
            question_id, text = args
            self._require("main_questions", "main_question_id", question_id)
            return self._insert("choices", "choice_id", {"main_question_id": question_id, "choice_text": text})

        if query == q.INSERT_SUB_QUESTION_QUERY:
            question_id, text = args
            self._require("main_questions", "main_question_id", question_id)
            return self._insert("sub_question", "sub_question_id", {"main_question_id": question_id, "sub_question": text})

        if query == q.SELECT_FORM_QUERY:
            return [dict(row) for row in self.tables["forms"] if row["form_id"] == args[0]]

        if query == q.SELECT_QUESTIONS_QUERY:
            types = {row["qtype_id"]: row["question_type"] for row in self.tables["question_type"]}
            found = [
                {**row, "question_type": types[row["qtype_id"]]}
                for row in self.tables["main_questions"] if row["form_id"] == args[0]
            ]
            return sorted(found, key=lambda row: row["main_question_id"])

        if query == q.SELECT_CHOICES_QUERY:
            found = [row for row in self.tables["choices"] if row["main_question_id"] == args[0]]
            return [dict(row) for row in sorted(found, key=lambda row: row["choice_id"])]

        if query == q.SELECT_SUB_QUESTIONS_QUERY:
            found = [row for row in self.tables["sub_question"] if row["main_question_id"] == args[0]]
            return [dict(row) for row in sorted(found, key=lambda row: row["sub_question_id"])]

        if query == q.INSERT_RESPONSE_QUERY:
            form_id, student_id = args
            self._require("forms", "form_id", form_id)
            return self._insert("responses", "response_id", {"form_id": form_id, "student_id": student_id})

        if query == q.INSERT_ANSWER_QUERY:
            response_id, question_id, choice_id, text_answer = args
            self._require("responses", "response_id", response_id)
            self._require("main_questions", "main_question_id", question_id)
            if choice_id is not None:
                self._require("choices", "choice_id", choice_id)
            return self._insert("answers", "answer_id", {
                "response_id": response_id, "main_question_id": question_id,
                "choice_id": choice_id, "text_answer": text_answer
            })

        if query == q.INSERT_GRID_ANSWER_QUERY:
            response_id, question_id, sub_question_id, choice_id = args
            self._require("responses", "response_id", response_id)
            self._require("main_questions", "main_question_id", question_id)
            self._require("sub_question", "sub_question_id", sub_question_id)
            self._require("choices", "choice_id", choice_id)
            return self._insert("grid_answer", "grid_answer_id", {
                "response_id": response_id, "main_question_id": question_id,
                "sub_question_id": sub_question_id, "choice_id": choice_id
            })

        raise AssertionError(f"unexpected statement: {query}")


class FakeTransaction:
    def __init__(self, db: FakeDatabase):
        self.db = db
        self.snapshot = None

    async def __aenter__(self):
        self.snapshot = copy.deepcopy(self.db.tables)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            self.db.tables = self.snapshot
        return False


class FakeConnection:
    def __init__(self, db: FakeDatabase):
        self.db = db

    def transaction(self):
        return FakeTransaction(self.db)

    async def fetchval(self, query, *args):
        result = self.db.run(query, args)
        if isinstance(result, list):
            return next(iter(result[0].values())) if result else None
        return result

    async def fetchrow(self, query, *args):
        result = self.db.run(query, args)
        return result[0] if result else None

    async def fetch(self, query, *args):
        return self.db.run(query, args)

    async def execute(self, query, *args):
        self.db.run(query, args)
        return "INSERT 0 1"

    async def executemany(self, query, args):
        for arg in args:
            self.db.run(query, tuple(arg))


class FakePool:
    def __init__(self, db: FakeDatabase):
        self.db = db
        self.acquired = 0
        self.released = 0
        self.closed = False

    async def acquire(self):
        self.acquired += 1
        return FakeConnection(self.db)

    async def release(self, conn):
        self.released += 1

    async def close(self):
        self.closed = True


@pytest.fixture
def db():
    return FakeDatabase()


@pytest.fixture
def pool(db, monkeypatch):
    fake_pool = FakePool(db)
    monkeypatch.setattr(sql, "connection_pool", fake_pool)
    return fake_pool


@pytest.fixture
def client(pool):
    return TestClient(app)


@pytest.fixture
def create_form(client):
    def _create(body: dict) -> int:
        response = client.post("/api/forms", json=body)
        assert response.status_code == 201, response.text
        return response.json()["id"]
    return _create
