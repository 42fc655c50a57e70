from typing import List, Optional

import strawberry
from fastapi import Depends
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from customer_api.api import get_store
from customer_api.errors import NotFoundError
from customer_api.schemas import CustomerCreate, CustomerOut, CustomerUpdate
from customer_api.store import CustomerStore


def make_context(store: CustomerStore = Depends(get_store)) -> dict:
    # resolvers reach the app's store via info.context
    return {"store": store}


def _store(info: Info) -> CustomerStore:
    return info.context["store"]


# ----------------------------
# GraphQL Types
# ----------------------------
@strawberry.type
class Customer:
    id: int
    name: str
    email: str
    company: str
    status: str

    @classmethod
    def from_row(cls, row: CustomerOut) -> "Customer":
        return cls(**row.model_dump())


# ----------------------------
# GraphQL Inputs
# ----------------------------
@strawberry.input
class CustomerCreateInput:
    name: Optional[str] = None
    email: Optional[str] = None
    company: Optional[str] = None
    status: Optional[str] = None


@strawberry.input
class CustomerUpdateInput:
    name: Optional[str] = None
    email: Optional[str] = None
    company: Optional[str] = None
    status: Optional[str] = None


# ----------------------------
# Query Root
# ----------------------------
@strawberry.type
class Query:
    @strawberry.field
    def customers(self, info: Info, status: Optional[str] = None) -> List[Customer]:
        store = _store(info)
        rows = store.list_all() if status is None else store.filter_by_status(status)
        return [Customer.from_row(r) for r in rows]

    @strawberry.field
    def customer(self, info: Info, id: int) -> Optional[Customer]:
        try:
            return Customer.from_row(_store(info).find_by_id(id))
        except NotFoundError:
            return None


# ----------------------------
# Mutation Root
# ----------------------------
@strawberry.type
class Mutation:
    @strawberry.mutation
    def create_customer(self, info: Info, input: CustomerCreateInput) -> Customer:
        # ValidationError propagates and is reported in the "errors" array
        dto = CustomerCreate(name=input.name, email=input.email, company=input.company, status=input.status)
        return Customer.from_row(_store(info).create(dto))

    @strawberry.mutation
    def update_customer(self, info: Info, id: int, input: CustomerUpdateInput) -> Optional[Customer]:
        dto = CustomerUpdate(name=input.name, email=input.email, company=input.company, status=input.status)
        try:
            return Customer.from_row(_store(info).update(id, dto))
        except NotFoundError:
            return None

    @strawberry.mutation
    def delete_customer(self, info: Info, id: int) -> Optional[Customer]:
        try:
            return Customer.from_row(_store(info).delete(id))
        except NotFoundError:
            return None


schema = strawberry.Schema(query=Query, mutation=Mutation)


def graphql_router() -> GraphQLRouter:
    return GraphQLRouter(schema, context_getter=make_context)
