"""Tests for request/response schemas."""

import pytest
from pydantic import ValidationError

from todo_api.api.schemas import TodoCreate, TodoListAdapter, TodoResponse


class TestTodoCreate:
    def test_defaults(self) -> None:
        todo = TodoCreate.model_validate({})
        assert todo.task == ""
        assert todo.completed is False

    def test_field_names_ignore_case(self) -> None:
        todo = TodoCreate.model_validate({"Task": "Buy milk", "COMPLETED": True})
        assert todo.task == "Buy milk"
        assert todo.completed is True

    def test_unknown_fields_are_ignored(self) -> None:
        todo = TodoCreate.model_validate({"task": "Walk", "id": 99, "priority": "high"})
        assert todo.task == "Walk"
        assert not hasattr(todo, "priority")

    def test_null_keeps_default(self) -> None:
        todo = TodoCreate.model_validate({"task": None, "completed": None})
        assert todo.task == ""
        assert todo.completed is False

    def test_null_body_is_empty_object(self) -> None:
        assert TodoCreate.model_validate(None) == TodoCreate()

    def test_last_duplicate_wins(self) -> None:
        todo = TodoCreate.model_validate({"task": "first", "TASK": "second"})
        assert todo.task == "second"

    @pytest.mark.parametrize(
        "payload",
        [
            {"task": 5},
            {"task": "ok", "completed": "true"},
            {"task": "ok", "completed": 1},
            ["task"],
            "task",
        ],
    )
    def test_rejects_wrong_shape(self, payload) -> None:
        with pytest.raises(ValidationError):
            TodoCreate.model_validate(payload)


class TestTodoListAdapter:
    def test_empty_list_encodes_as_null(self) -> None:
        assert TodoListAdapter.dump_json(None) == b"null"

    def test_encodes_wire_format(self) -> None:
        todos = [TodoResponse(id=1, task="Learn Go", completed=False)]
        assert TodoListAdapter.dump_json(todos) == b'[{"id":1,"task":"Learn Go","completed":false}]'


class TestTodoCreateFromJson:
    """Parsing straight from the request bytes."""

    def test_field_names_ignore_case(self) -> None:
        todo = TodoCreate.model_validate_json(b'{"Task": "Buy milk", "COMPLETED": true, "id": 3}')
        assert todo.task == "Buy milk"
        assert todo.completed is True

    def test_null_body_is_empty_object(self) -> None:
        assert TodoCreate.model_validate_json(b"null") == TodoCreate()

    @pytest.mark.parametrize(
        "raw",
        [
            b"",
            b"not json",
            b"[" * 100000,
            b'{"task": "\\ud800"}',
            b'{"task": "a"} trailing',
        ],
    )
    def test_rejects_malformed_json(self, raw: bytes) -> None:
        with pytest.raises(ValidationError):
            TodoCreate.model_validate_json(raw)
