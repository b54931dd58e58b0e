from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import AllowInfNan, BaseModel, ConfigDict, Strict, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

from ..domain.sessions import SessionTag


class CamelModel(BaseModel):
    """Wire models use camelCase; Python code uses snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Messages for required fields. Keys are dotted camelCase paths.
REQUIRED_FIELD_MESSAGES: tuple[tuple[str, str], ...] = (
    ("finkAccountId", "finkAccountId is required"),
    ("sourceAccount.id", "sourceAccount.id is required"),
    ("transaction.amount", "transaction.amount is required and must be a number"),
    ("personId", "personId is required"),
    ("student.universityId", "student.universityId is required"),
)

FiniteFloat = Annotated[float, Strict(), AllowInfNan(False)]

# Request models type only the required fields; optional ones are `Any`.


# ------------------------
# Fink
# ------------------------

class FinkSessionRequest(CamelModel):
    """Open a Fink payment session for an account."""
    fink_account_id: StrictStr
    currency: Any = None
    description: Any = None


class FinkSessionResponse(CamelModel):
    session_id: str
    fink_account_id: str
    status_hint: SessionTag


class SourceAccount(CamelModel):
    id: StrictStr
    type: Any = None


class TransactionDetails(CamelModel):
    amount: Union[StrictInt, FiniteFloat]
    currency: Any = None
    description: Any = None


class FinkTransferRequest(CamelModel):
    """Move money out of `source_account`."""
    source_account: SourceAccount
    transaction: TransactionDetails
    idempotency_key: Any = None


class TransferEcho(CamelModel):
    source_account_id: str
    amount: Union[int, float]
    # Echoed verbatim when truthy, whatever its type.
    currency: Any


class FinkTransferResponse(CamelModel):
    status: Literal["SUCCESS", "FAILED"]
    transaction_id: Optional[str] = None
    processed_at: str
    failure_code: Optional[str] = None
    failure_reason: Optional[str] = None
    echo: TransferEcho


# ------------------------
# Pearl
# ------------------------

class StudentVerificationRequest(CamelModel):
    person_id: StrictStr
    full_name: Any = None


class StudentVerificationResponse(CamelModel):
    person_id: str
    verified: bool
    reason: str
    checked_at: str
    role: Literal["STUDENT"] = "STUDENT"


class StudentIdentity(CamelModel):
    university_id: StrictStr
    full_name: Any = None


class UniversityVerificationRequest(CamelModel):
    student: StudentIdentity
    # Caller bookkeeping (requestedBySystem, requestId, requestedAt); ignored.
    context: Any = None


class VerificationMetadata(CamelModel):
    provider: str
    rule: str


class UniversityVerificationResponse(CamelModel):
    university_id: str
    verified: bool
    reason: str
    checked_at: str
    metadata: VerificationMetadata


class ErrorResponse(BaseModel):
    """Uniform error envelope."""
    error: str
    message: str
    details: None = None
