"""
Employee endpoints.

Basic employee operations under ``/api/employee``: reading an
employee's information and listing, adding, updating and deleting the
employee's leaves.  Request bodies and query values are checked by
``api.validation`` before the data-access service is called.  Errors
raised by the service are passed to the client with their own status
code and message.
"""

from typing import Any, Dict, List, Optional

from fastapi import Body, Depends, HTTPException, Query, Response, status

from ...core.exceptions import ServiceError
from ...core.security import get_current_user, require_access_allowed
from ...mapping import employee_to_dto, leave_input_to_record, leave_update_to_record, leaves_to_dto
from ...schemas.employee import EmployeeRead
from ...schemas.leave import LeaveRead
from ...services.employee_service import EmployeeService
from ..deps import get_employee_service
from ..routes import Route, build_router
from ..validation import validate_leave_ids, validate_leave_inputs, validate_leave_updates


async def get_info(
    employee_id: int,
    current_user: Dict[str, Any] = Depends(require_access_allowed),
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeRead:
    """Send basic information about the employee.

    Only the employee themselves, a manager or an administrator may
    read it (the "AccessAllowed" policy).
    """
    try:
        employee = await service.get_by_id(employee_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail) from e
    return employee_to_dto(employee)


async def get_leaves(
    employee_id: int,
    current_user: Dict[str, Any] = Depends(get_current_user),
    service: EmployeeService = Depends(get_employee_service),
) -> List[LeaveRead]:
    """Get the list of the employee's leaves."""
    try:
        employee = await service.get_by_id(employee_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail) from e
    return leaves_to_dto(employee.leaves)


async def add_leaves(
    employee_id: int,
    payload: Any = Body(None),
    current_user: Dict[str, Any] = Depends(get_current_user),
    service: EmployeeService = Depends(get_employee_service),
) -> Response:
    """Add new leaves for the employee.

    The body is a list of ``LeaveInput`` items.  Added leaves start in
    the ``Pending`` status.
    """
    result = validate_leave_inputs(payload)
    try:
        result.raise_for_errors()
        await service.add_leaves(employee_id, [leave_input_to_record(item) for item in result.value])
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail) from e
    return Response(status_code=status.HTTP_200_OK)


async def update_leaves(
    employee_id: int,
    payload: Any = Body(None),
    current_user: Dict[str, Any] = Depends(get_current_user),
    service: EmployeeService = Depends(get_employee_service),
) -> Response:
    """Update information on the employee's leaves.

    Every item must carry the id of an existing leave of this employee;
    if one of them does not, no leave is changed.
    """
    result = validate_leave_updates(payload)
    try:
        result.raise_for_errors()
        await service.update_leaves(employee_id, [leave_update_to_record(item) for item in result.value])
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail) from e
    return Response(status_code=status.HTTP_200_OK)


async def delete_leaves(
    employee_id: int,
    leaveID: Optional[List[str]] = Query(None, description="Ids of the leaves to delete"),
    current_user: Dict[str, Any] = Depends(get_current_user),
    service: EmployeeService = Depends(get_employee_service),
) -> Response:
    """Delete leave records, e.g. ``?leaveID=1&leaveID=2``.

    A leave of another employee is refused with 403 and nothing is
    deleted.
    """
    result = validate_leave_ids(leaveID)
    try:
        result.raise_for_errors()
        await service.delete_leaves(employee_id, result.value)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail) from e
    return Response(status_code=status.HTTP_200_OK)


_UNAUTHORIZED = {401: {"description": "Not authenticated"}}
_BAD_REQUEST = {400: {"description": "Bad request"}}
_NOT_FOUND = {404: {"description": "Employee or leave not found"}}
_FORBIDDEN = {403: {"description": "You cannot change another employee's leave"}}

ROUTES = [
    Route(
        "GET",
        "/{employee_id}/info",
        get_info,
        EmployeeRead,
        {**_UNAUTHORIZED, 403: {"description": "Access denied"}, 404: {"description": "Employee not found"}},
    ),
    Route("GET", "/{employee_id}/leaves", get_leaves, List[LeaveRead], {**_UNAUTHORIZED, **_NOT_FOUND}),
    Route("POST", "/{employee_id}/leaves", add_leaves, None, {**_BAD_REQUEST, **_UNAUTHORIZED, **_NOT_FOUND}),
    Route(
        "PUT",
        "/{employee_id}/leaves",
        update_leaves,
        None,
        {**_BAD_REQUEST, **_UNAUTHORIZED, **_FORBIDDEN, **_NOT_FOUND},
    ),
    Route(
        "DELETE",
        "/{employee_id}/leaves",
        delete_leaves,
        None,
        {**_BAD_REQUEST, **_UNAUTHORIZED, **_FORBIDDEN, **_NOT_FOUND},
    ),
]

router = build_router(ROUTES)
