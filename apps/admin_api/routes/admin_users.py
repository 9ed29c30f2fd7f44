from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from apps.admin_api.core.db import get_db
from apps.admin_api.core.security import ADMIN_GUARDS
from apps.admin_api.models.user_model import User
from apps.admin_api.schemas.company_schema import CompanyOut
from apps.admin_api.schemas.user_schema import UserDetail, UserListItem
from apps.admin_api.services.user_service import user_service

router = APIRouter(dependencies=[Depends(guard) for guard in ADMIN_GUARDS])


def _user_to_list_item(user: User) -> UserListItem:
    return UserListItem(
        id=user.id,
        email=user.email,
        name=user.name,
        created_at=user.created_at,
        company=CompanyOut.model_validate(user.company) if user.company else None,
        quotes_count=len(user.quotes),
        jobs_count=len(user.jobs),
    )


@router.get("", response_model=list[UserListItem], name="admin.users.index")
def index(db: Session = Depends(get_db)):
    users = user_service.list_users(db)
    return [_user_to_list_item(u) for u in users]


@router.get("/{user_id}", response_model=UserDetail, name="admin.users.show")
def show(user_id: str, db: Session = Depends(get_db)):
    return user_service.get_user(db, user_id)
