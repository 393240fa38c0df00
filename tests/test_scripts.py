import asyncio

import pytest

import create_token
import seed_demo
from ltregistrator_api.app.core.security import decode_access_token
from ltregistrator_api.app.services.employee_service import EmployeeService


def test_seed_creates_demo_data_once(tmp_path):
    db = str(tmp_path / "demo.db")

    created = asyncio.run(seed_demo.seed(db))

    assert set(created) == {mail for _, _, mail, _, _ in seed_demo.EMPLOYEES}
    irina = asyncio.run(EmployeeService(db).get_by_id(created["irina.volkova@example.com"]))
    assert len(irina.leaves) == 2
    assert [p.name for p in irina.projects] == ["Timesheet Portal", "Mobile Client"]

    assert asyncio.run(seed_demo.seed(db)) == {}


def test_seed_cli_refuses_non_empty_database(tmp_path, capsys):
    db = str(tmp_path / "demo.db")
    seed_demo.main(["--db", db])
    assert "[+] Employee" in capsys.readouterr().out

    with pytest.raises(SystemExit) as exc:
        seed_demo.main(["--db", db])
    assert exc.value.code == 1


def test_create_token_cli_prints_valid_token(capsys):
    create_token.main(["--employee-id", "5", "--role", "Manager", "--days", "2"])

    payload = decode_access_token(capsys.readouterr().out.strip())

    assert payload["sub"] == "5"
    assert payload["role"] == "Manager"
