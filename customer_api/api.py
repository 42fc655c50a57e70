from typing import Optional

from fastapi import APIRouter, Depends, Request, status

from customer_api.errors import NotFoundError
from customer_api.schemas import (
    CustomerCreate,
    CustomerEnvelope,
    CustomerListEnvelope,
    CustomerUpdate,
    ErrorEnvelope,
)
from customer_api.store import CustomerStore

NOT_FOUND = {404: {"model": ErrorEnvelope}}

# ---------- Dependencies ----------

def get_store(request: Request) -> CustomerStore:
    return request.app.state.store


def parse_id(cid: str) -> int:
    # only plain ASCII digits name a record; anything else is not found
    if not (cid.isascii() and cid.isdigit()):
        raise NotFoundError(cid)
    return int(cid)


# ---------- Routers ----------

customers_router = APIRouter(prefix="/api/customers", tags=["customers"])


@customers_router.get("", response_model=CustomerListEnvelope)
def list_customers(store: CustomerStore = Depends(get_store)):
    return CustomerListEnvelope.of(store.list_all())


@customers_router.get("/status/{customer_status}", response_model=CustomerListEnvelope)
def customers_by_status(customer_status: str, store: CustomerStore = Depends(get_store)):
    return CustomerListEnvelope.of(store.filter_by_status(customer_status))


@customers_router.get("/{cid}", response_model=CustomerEnvelope, responses=NOT_FOUND)
def get_customer(cid: str, store: CustomerStore = Depends(get_store)):
    return CustomerEnvelope(data=store.find_by_id(parse_id(cid)))


@customers_router.post(
    "",
    response_model=CustomerEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorEnvelope}},
)
def create_customer(dto: Optional[CustomerCreate] = None, store: CustomerStore = Depends(get_store)):
    return CustomerEnvelope(data=store.create(dto or CustomerCreate()))


@customers_router.put("/{cid}", response_model=CustomerEnvelope, responses=NOT_FOUND)
def update_customer(cid: str, dto: Optional[CustomerUpdate] = None, store: CustomerStore = Depends(get_store)):
    return CustomerEnvelope(data=store.update(parse_id(cid), dto or CustomerUpdate()))


@customers_router.delete("/{cid}", response_model=CustomerEnvelope, responses=NOT_FOUND)
def delete_customer(cid: str, store: CustomerStore = Depends(get_store)):
    return CustomerEnvelope(data=store.delete(parse_id(cid)))
