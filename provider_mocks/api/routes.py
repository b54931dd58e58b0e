from __future__ import annotations

from fastapi import APIRouter, Depends

from ..service import fink_service, pearl_service
from .deps import json_body
from .models import (
    ErrorResponse,
    FinkSessionRequest,
    FinkSessionResponse,
    FinkTransferRequest,
    FinkTransferResponse,
    StudentVerificationRequest,
    StudentVerificationResponse,
    UniversityVerificationRequest,
    UniversityVerificationResponse,
)

router = APIRouter(prefix="/api")

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or malformed input"},
    500: {"model": ErrorResponse, "description": "Unexpected error"},
}


@router.post(
    "/fink/sessions",
    response_model=FinkSessionResponse,
    responses=_ERROR_RESPONSES,
    summary="Open a Fink payment session",
    tags=["fink"],
)
async def create_fink_session(
    req: FinkSessionRequest = Depends(json_body(FinkSessionRequest)),
) -> FinkSessionResponse:
    """Return a session id that encodes the account's outcome."""
    out = fink_service.create_session(fink_account_id=req.fink_account_id)
    return FinkSessionResponse(**out)


@router.post(
    "/fink/transfers",
    response_model=FinkTransferResponse,
    responses=_ERROR_RESPONSES,
    summary="Execute a Fink transfer",
    tags=["fink"],
)
async def create_fink_transfer(
    req: FinkTransferRequest = Depends(json_body(FinkTransferRequest)),
) -> FinkTransferResponse:
    """Transfer funds; blocked or empty accounts yield status FAILED."""
    out = fink_service.create_transfer(
        source_account_id=req.source_account.id,
        amount=req.transaction.amount,
        currency=req.transaction.currency,
    )
    return FinkTransferResponse(**out)


@router.post(
    "/pearl/student-verifications",
    response_model=StudentVerificationResponse,
    responses=_ERROR_RESPONSES,
    summary="Verify a student",
    tags=["pearl"],
)
async def verify_student(
    req: StudentVerificationRequest = Depends(json_body(StudentVerificationRequest)),
) -> StudentVerificationResponse:
    out = pearl_service.verify_student(person_id=req.person_id)
    return StudentVerificationResponse(**out)


@router.post(
    "/pearl/university-verifications",
    response_model=UniversityVerificationResponse,
    responses=_ERROR_RESPONSES,
    summary="Verify a student's university id",
    tags=["pearl"],
)
async def verify_university(
    req: UniversityVerificationRequest = Depends(json_body(UniversityVerificationRequest)),
) -> UniversityVerificationResponse:
    out = pearl_service.verify_university(university_id=req.student.university_id)
    return UniversityVerificationResponse(**out)
