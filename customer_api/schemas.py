from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_STATUS = "active"
UPDATABLE_FIELDS = ("name", "email", "company", "status")

# ---------- DTOs (Pydantic models) ----------

class CustomerBase(BaseModel):
    name: str
    email: str
    company: str
    status: str = DEFAULT_STATUS


class CustomerCreate(BaseModel):
    # presence is checked by the store so a missing field maps to a 400,
    # not to FastAPI's 422
    name: Optional[str] = None
    email: Optional[str] = None
    company: Optional[str] = None
    status: Optional[str] = None

    def missing_required(self) -> bool:
        return not (self.name and self.email and self.company)


class CustomerUpdate(BaseModel):
    # partial update; None (or "") means "leave unchanged"
    name: Optional[str] = None
    email: Optional[str] = None
    company: Optional[str] = None
    status: Optional[str] = None

    def changes(self) -> Dict[str, str]:
        """Fields that should overwrite the stored record.

        An empty string cannot clear a field: it is treated the same as
        omitting it.
        """
        patch = self.model_dump(include=set(UPDATABLE_FIELDS))
        return {k: v for k, v in patch.items() if v}


class CustomerOut(CustomerBase):
    # stored records change only through CustomerStore.update
    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)


# ---------- Response envelopes ----------

class CustomerEnvelope(BaseModel):
    success: bool = True
    data: CustomerOut


class CustomerListEnvelope(BaseModel):
    success: bool = True
    count: int
    data: List[CustomerOut]

    @classmethod
    def of(cls, rows: List[CustomerOut]) -> "CustomerListEnvelope":
        return cls(count=len(rows), data=rows)


class ErrorEnvelope(BaseModel):
    success: bool = False
    error: str


class HealthOut(BaseModel):
    status: str = "OK"
    message: Optional[str] = None
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
