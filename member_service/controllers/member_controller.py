# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: member CRUD as a JSON API."""
from fastapi import APIRouter, Depends, HTTPException, Response

from member_service.core.dependencies import get_member_service
from member_service.errors import DuplicateError, MemberValidationError, NotFoundError
from member_service.schemas import MemberIn, MemberList, MemberOut
from member_service.services.member_service import MemberService

router = APIRouter(prefix="/api/v1", tags=["Members"])


@router.get("/members", response_model=MemberList)
def list_members(service: MemberService = Depends(get_member_service)):
    members = service.list_members()
    return MemberList(total=len(members), members=[MemberOut(**m.model_dump()) for m in members])


@router.get("/members/{user_id}", response_model=MemberOut)
def get_member(user_id: int, service: MemberService = Depends(get_member_service)):
    try:
        return MemberOut(**service.get_member(user_id).model_dump())
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))


@router.post("/members", status_code=201, response_model=MemberOut)
def create_member(body: MemberIn, service: MemberService = Depends(get_member_service)):
    try:
        record = service.create_member(body)
    except MemberValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.messages)
    except DuplicateError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    return MemberOut(**record.model_dump())


@router.put("/members/{user_id}", response_model=MemberOut)
def update_member(user_id: int, body: MemberIn,
                  service: MemberService = Depends(get_member_service)):
    try:
        record = service.update_member(user_id, body)
    except MemberValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.messages)
    except DuplicateError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return MemberOut(**record.model_dump())


@router.delete("/members/{user_id}", status_code=204)
def delete_member(user_id: int, service: MemberService = Depends(get_member_service)):
    try:
        service.delete_member(user_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return Response(status_code=204)
