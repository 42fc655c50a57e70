from typing import List

from customer_api.schemas import CustomerOut

# ---------- Startup data ----------

SEED_CUSTOMERS: List[CustomerOut] = [
    CustomerOut(id=1, name="Alia Johnson", email="alice@acmecorp.com", company="Acme Corp", status="active"),
    CustomerOut(id=2, name="Bob Smith", email="bob@techstart.io", company="TechStart", status="active"),
    CustomerOut(id=3, name="Charlie Brown", email="charlie@innovate.com", company="Innovate Inc", status="inactive"),
    CustomerOut(id=4, name="Diana Prince", email="diana@wondertech.com", company="WonderTech", status="active"),
    CustomerOut(id=5, name="Eve Martinez", email="eve@cloudnine.com", company="Cloud Nine", status="active"),
]


def seed_customers() -> List[CustomerOut]:
    # fresh copies so one store's mutations never leak into another
    return [c.model_copy() for c in SEED_CUSTOMERS]
