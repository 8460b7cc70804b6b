"""
Tests for the saved analysis CRUD operations.
"""

import json
import pytest
from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from app.db.crud import save_analysis, get_analysis, list_analyses, serialize_result
from app.utils.error_handling import PersistenceError


def test_save_structured_result(db_session):
    """Dict results are stored as JSON."""
    result = {"topic": "A", "keyPoints": ["x"], "summary": "S"}

    saved = save_analysis(db_session, result)

    assert saved.id is not None
    assert saved.created_at is not None
    assert json.loads(saved.result) == result


def test_save_raw_text(db_session):
    """Raw model text is stored unchanged."""
    saved = save_analysis(db_session, "The model said something odd")

    assert get_analysis(db_session, saved.id).result == "The model said something odd"


def test_get_missing_analysis(db_session):
    assert get_analysis(db_session, 999999) is None


def test_list_newest_first(db_session):
    first = save_analysis(db_session, "first")
    second = save_analysis(db_session, "second")

    listed = list_analyses(db_session, limit=10)

    assert [a.id for a in listed] == [second.id, first.id]
    assert len(list_analyses(db_session, limit=1)) == 1


def test_serialize_result():
    assert serialize_result("text") == "text"
    assert serialize_result({"a": "é"}) == '{"a": "é"}'
    assert serialize_result(None) == "null"


def test_database_failure_raises_persistence_error(db_session):
    with patch.object(db_session, "commit", side_effect=OperationalError("INSERT", {}, Exception("disk full"))):
        with pytest.raises(PersistenceError) as exc_info:
            save_analysis(db_session, {"topic": "A"})

    assert exc_info.value.message == "Failed to save video analysis"
