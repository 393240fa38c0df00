from datetime import date

import pytest
from conftest import auth
from fastapi.testclient import TestClient

from ltregistrator_api.app.api.validation import validate_leave_ids, validate_leave_inputs, validate_leave_updates
from ltregistrator_api.app.core.exceptions import ValidationError
from ltregistrator_api.app.main import create_app
from ltregistrator_api.app.models import LeaveType


class RecordingEmployeeService:
    """Stands in for the data-access service and remembers every call."""

    def __init__(self):
        self.calls = []

    async def get_by_id(self, employee_id):
        self.calls.append(("get_by_id", employee_id))
        raise AssertionError("not expected in these tests")

    async def add_leaves(self, employee_id, leaves):
        self.calls.append(("add_leaves", employee_id, leaves))
        return list(range(1, len(leaves) + 1))

    async def update_leaves(self, employee_id, leaves):
        self.calls.append(("update_leaves", employee_id, leaves))

    async def delete_leaves(self, employee_id, leave_ids):
        self.calls.append(("delete_leaves", employee_id, leave_ids))


@pytest.fixture
def recorder():
    return RecordingEmployeeService()


@pytest.fixture
def fake_client(settings, recorder):
    app = create_app(settings=settings, employee_service=recorder, project_service=object())
    with TestClient(app) as c:
        yield c


@pytest.mark.parametrize(
    "body",
    [
        None,
        {"type_leave": "Vacation", "start_date": "2024-07-01", "end_date": "2024-07-02"},
        [],
        [{"type_leave": "Vacation"}],
        [{"type_leave": "Vacation", "start_date": "2024-07-01", "end_date": "2024-07-02", "id": 5}],
        [{"type_leave": "Vacation", "start_date": "not-a-date", "end_date": "2024-07-02"}],
    ],
)
def test_invalid_add_body_never_reaches_service(fake_client, recorder, body):
    r = fake_client.post("/api/employee/1/leaves", json=body, headers=auth(1))

    assert r.status_code == 400
    assert recorder.calls == []


UPDATE_ITEM = {"id": 7, "type_leave": "Vacation", "start_date": "2024-07-01", "end_date": "2024-07-02"}


@pytest.mark.parametrize(
    "body",
    [
        None,
        UPDATE_ITEM,
        [],
        [UPDATE_ITEM, dict(UPDATE_ITEM)],
        [{**UPDATE_ITEM, "id": 0}],
        [{k: v for k, v in UPDATE_ITEM.items() if k != "id"}],
        [{**UPDATE_ITEM, "status": "Cancelled"}],
        [{**UPDATE_ITEM, "end_date": "2024-06-30"}],
    ],
)
def test_invalid_update_body_never_reaches_service(fake_client, recorder, body):
    r = fake_client.put("/api/employee/1/leaves", json=body, headers=auth(1))

    assert r.status_code == 400
    assert recorder.calls == []


def test_invalid_leave_ids_never_reach_service(fake_client, recorder):
    r = fake_client.delete("/api/employee/1/leaves", params={"leaveID": ["1", "-3"]}, headers=auth(1))

    assert r.status_code == 400
    assert recorder.calls == []


def test_valid_add_body_is_converted_to_records(fake_client, recorder):
    body = [{"type_leave": "Idle", "start_date": "2024-07-01", "end_date": "2024-07-02"}]

    r = fake_client.post("/api/employee/3/leaves", json=body, headers=auth(3))

    assert r.status_code == 200
    [(name, employee_id, leaves)] = recorder.calls
    assert (name, employee_id) == ("add_leaves", 3)
    assert leaves[0].type_leave == LeaveType.IDLE
    assert leaves[0].start_date == date(2024, 7, 1)


def test_valid_leave_ids_reach_service_as_ints(fake_client, recorder):
    r = fake_client.delete("/api/employee/3/leaves", params={"leaveID": [4, 8]}, headers=auth(3))

    assert r.status_code == 200
    assert recorder.calls == [("delete_leaves", 3, [4, 8])]


def test_validate_leave_inputs_returns_typed_items():
    result = validate_leave_inputs([{"type_leave": "SickLeave", "start_date": "2024-01-01", "end_date": "2024-01-02"}])

    assert result.is_valid
    assert result.value[0].type_leave == LeaveType.SICK_LEAVE


def test_validate_leave_updates_rejects_duplicate_ids():
    item = {"id": 7, "type_leave": "Vacation", "start_date": "2024-01-01", "end_date": "2024-01-02"}

    result = validate_leave_updates([item, dict(item)])

    assert not result.is_valid
    assert result.errors[0]["loc"] == ["body", 1, "id"]


@pytest.mark.parametrize("raw", [None, [], ["abc"], ["0"], ["²"]])
def test_validate_leave_ids_rejects(raw):
    assert not validate_leave_ids(raw).is_valid


def test_validate_leave_ids_accepts_positive_ints():
    assert validate_leave_ids([" 12", "3"]).value == [12, 3]


def test_update_with_json_null_never_reaches_service(fake_client, recorder):
    headers = {**auth(1), "Content-Type": "application/json"}

    r = fake_client.put("/api/employee/1/leaves", content="null", headers=headers)

    assert r.status_code == 400
    assert recorder.calls == []


def test_invalid_result_raises_validation_error_with_field_errors():
    result = validate_leave_ids(["1", "x"])

    with pytest.raises(ValidationError) as exc:
        result.raise_for_errors()

    assert exc.value.status_code == 400
    assert exc.value.detail == [{"loc": ["query", "leaveID", 1], "msg": "Leave id must be a positive integer",
                                 "type": "int_parsing"}]


def test_valid_result_does_not_raise():
    validate_leave_ids(["1"]).raise_for_errors()
