from budgetbook.models import UserAccount, BankAccount, Bucket, LineItem
from budgetbook.routes.crud_routes import build_crud_router
from budgetbook.schemas import (
    UserAccountRecord,
    BankAccountRecord,
    BucketRecord,
    LineItemRecord,
)
from budgetbook.services.crud_service import CrudService

user_router = build_crud_router(
    collection="/users",
    item="/user",
    schema=UserAccountRecord,
    service=CrudService(UserAccount),
    label="User",
    conflict_detail="Username already in use.",
)

bank_router = build_crud_router(
    collection="/banks",
    item="/bank",
    schema=BankAccountRecord,
    service=CrudService(BankAccount),
    label="Bank",
)

bucket_router = build_crud_router(
    collection="/buckets",
    item="/bucket",
    schema=BucketRecord,
    service=CrudService(Bucket),
    label="Bucket",
)

lineitem_router = build_crud_router(
    collection="/lineitems",
    item="/lineitem",
    schema=LineItemRecord,
    service=CrudService(LineItem),
    label="LineItem",
)

routers = [user_router, bank_router, bucket_router, lineitem_router]
