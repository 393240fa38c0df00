#!/usr/bin/env python3
"""
Issue a bearer token for an employee.

The token is signed with ``SECRET_KEY`` from the environment, so run
this with the same environment as the API server.

Usage:
    python create_token.py --employee-id 1 --role Administrator --days 365
"""

import argparse
from typing import List, Optional

from ltregistrator_api.app.core.security import create_access_token
from ltregistrator_api.app.models import Role


def build_token(employee_id: int, role: str, days: int) -> str:
    return create_access_token({"sub": str(employee_id), "role": Role(role).value}, expires_delta=days * 24 * 60 * 60)


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Print a bearer token for the LTRegistrator API.")
    ap.add_argument("--employee-id", type=int, required=True, help="Id of the employee the token is issued to")
    ap.add_argument("--role", default=Role.EMPLOYEE.value, choices=[r.value for r in Role], help="Role claim")
    ap.add_argument("--days", type=int, default=1, help="Lifetime of the token in days")
    args = ap.parse_args(argv)
    print(build_token(args.employee_id, args.role, args.days))


if __name__ == "__main__":
    main()
