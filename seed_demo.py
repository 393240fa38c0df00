#!/usr/bin/env python3
"""
Fill an LTRegistrator SQLite database with demo data.

Creates the schema if needed, then inserts a few projects, employees
and leaves.  A database that already contains employees is left alone.

Usage:
    python seed_demo.py --db ./ltregistrator.db
"""

import argparse
import asyncio
import sys
from datetime import date
from typing import Dict, List, Optional

from ltregistrator_api.app.core.db import get_connection, init_db
from ltregistrator_api.app.models import Leave, LeaveType, Role
from ltregistrator_api.app.services.employee_service import EmployeeService
from ltregistrator_api.app.services.project_service import ProjectService

PROJECTS = ["Timesheet Portal", "Payroll Integration", "Mobile Client"]

EMPLOYEES = [
    ("Anna", "Smirnova", "anna.smirnova@example.com", Role.ADMINISTRATOR, [0, 1]),
    ("Pavel", "Orlov", "pavel.orlov@example.com", Role.MANAGER, [0]),
    ("Irina", "Volkova", "irina.volkova@example.com", Role.EMPLOYEE, [0, 2]),
    ("Oleg", "Sokolov", "oleg.sokolov@example.com", Role.EMPLOYEE, [1]),
]

LEAVES = {
    "irina.volkova@example.com": [
        (LeaveType.VACATION, date(2024, 7, 1), date(2024, 7, 14)),
        (LeaveType.SICK_LEAVE, date(2024, 3, 4), date(2024, 3, 6)),
    ],
    "oleg.sokolov@example.com": [
        (LeaveType.TRAINING, date(2024, 5, 20), date(2024, 5, 22)),
    ],
}


def is_empty(db_path: str) -> bool:
    conn = get_connection(db_path)
    try:
        row = conn.execute("SELECT COUNT(*) AS count FROM employees").fetchone()
        return row["count"] == 0
    finally:
        conn.close()


async def seed(db_path: str) -> Dict[str, int]:
    """Insert the demo records and return employee ids keyed by mail."""
    init_db(db_path)
    if not is_empty(db_path):
        return {}

    employees = EmployeeService(db_path)
    projects = ProjectService(db_path)

    project_ids: List[int] = [await projects.create_project(name) for name in PROJECTS]
    employee_ids: Dict[str, int] = {}
    for first_name, second_name, mail, role, project_refs in EMPLOYEES:
        employee_id = await employees.create_employee(first_name, second_name, mail, role)
        for ref in project_refs:
            await employees.assign_project(employee_id, project_ids[ref])
        employee_ids[mail] = employee_id

    for mail, items in LEAVES.items():
        await employees.add_leaves(
            employee_ids[mail],
            [Leave(id=None, employee_id=None, type_leave=t, start_date=s, end_date=e) for t, s, e in items],
        )
    return employee_ids


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Seed the LTRegistrator SQLite database with demo data.")
    ap.add_argument("--db", required=True, help="Path to SQLite DB file (e.g., ./ltregistrator.db)")
    args = ap.parse_args(argv)

    created = asyncio.run(seed(args.db))
    if not created:
        print(f"[!] Database already has employees, nothing seeded: {args.db}", file=sys.stderr)
        sys.exit(1)
    for mail, employee_id in created.items():
        print(f"[+] Employee {employee_id}: {mail}")


if __name__ == "__main__":
    main()
