import logging
import threading
from typing import Iterable, List, Optional

from customer_api.errors import NotFoundError, ValidationError
from customer_api.schemas import DEFAULT_STATUS, CustomerCreate, CustomerOut, CustomerUpdate
from customer_api.seed import seed_customers

logger = logging.getLogger("customer_api.store")


class CustomerStore:
    """Ordered, in-memory customer records.

    Every public operation runs under one re-entrant lock: FastAPI dispatches
    sync endpoints onto a thread pool, and both the id computation in
    `create` and the merge in `update` are read-modify-write.

    Ids are allocated as ``len(store) + 1`` at call time. After a delete this
    can hand out an id that is still held by a later record; callers that need
    unique ids must not delete.
    """

    def __init__(self, rows: Optional[Iterable[CustomerOut]] = None) -> None:
        self._rows: List[CustomerOut] = list(rows or [])
        self._lock = threading.RLock()

    @classmethod
    def seeded(cls) -> "CustomerStore":
        return cls(seed_customers())

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)

    # ---------- Queries ----------

    def list_all(self) -> List[CustomerOut]:
        with self._lock:
            return list(self._rows)

    def find_by_id(self, cid: int) -> CustomerOut:
        with self._lock:
            return self._rows[self._index_of(cid)]

    def filter_by_status(self, status: str) -> List[CustomerOut]:
        with self._lock:
            return [c for c in self._rows if c.status == status]

    # ---------- Mutations ----------

    def create(self, dto: CustomerCreate) -> CustomerOut:
        if dto.missing_required():
            logger.warning("Rejected customer create: missing required field")
            raise ValidationError()

        with self._lock:
            customer = CustomerOut(
                id=len(self._rows) + 1,
                name=dto.name,
                email=dto.email,
                company=dto.company,
                status=dto.status or DEFAULT_STATUS,
            )
            self._rows.append(customer)

        logger.info("Created customer id=%s", customer.id)
        return customer

    def update(self, cid: int, dto: CustomerUpdate) -> CustomerOut:
        patch = dto.changes()
        with self._lock:
            idx = self._index_of(cid)
            updated = self._rows[idx].model_copy(update=patch)
            self._rows[idx] = updated

        logger.info("Updated customer id=%s fields=%s", cid, sorted(patch))
        return updated

    def delete(self, cid: int) -> CustomerOut:
        with self._lock:
            removed = self._rows.pop(self._index_of(cid))

        logger.info("Deleted customer id=%s", cid)
        return removed

    # ---------- Helpers ----------

    def _index_of(self, cid: int) -> int:
        # first match wins; ids can repeat after delete + create
        for idx, customer in enumerate(self._rows):
            if customer.id == cid:
                return idx
        logger.warning("Customer id=%s not found", cid)
        raise NotFoundError(cid)
