import pytest

from tracker.updates import IssueUpdateSet, ProjectUpdateSet


def test_only_provided_fields_are_present():
    changes = IssueUpdateSet.from_data({"status": "CLOSED", "description": "", "ignored": 1})

    assert "status" in changes
    assert "description" in changes
    assert changes["description"] == ""
    assert "title" not in changes
    assert len(changes) == 2


def test_empty_set_is_falsy():
    assert not ProjectUpdateSet()
    assert ProjectUpdateSet(description=None)


def test_unknown_field_is_a_programming_error():
    with pytest.raises(TypeError):
        ProjectUpdateSet(status="OPEN")
