import logging
import re
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session, joinedload, selectinload

from apps.admin_api.core.db import import_models
from apps.admin_api.core.errors import NotFoundError
from apps.admin_api.models.user_model import User

import_models()

logger = logging.getLogger(__name__)

# Relations resolved for both admin views
USER_RELATIONS = ("company", "quotes", "jobs")

# Largest value a 64-bit signed INTEGER primary key can hold
MAX_USER_ID = 2**63 - 1
_DIGITS = re.compile(r"[0-9]{1,19}")

# Many-to-one rides along on the main SELECT; collections are fetched in
# one batched SELECT ... WHERE user_id IN (...) each.
_LOADERS = {
    "company": lambda: joinedload(User.company),
    "quotes": lambda: selectinload(User.quotes),
    "jobs": lambda: selectinload(User.jobs),
}


def _parse_user_id(user_id) -> Optional[int]:
    """Only plain ASCII digit strings within the INTEGER column range are ids."""
    if isinstance(user_id, int) and not isinstance(user_id, bool):
        parsed = user_id
    elif isinstance(user_id, str) and _DIGITS.fullmatch(user_id):
        parsed = int(user_id)
    else:
        return None
    if not 1 <= parsed <= MAX_USER_ID:
        return None
    return parsed


class UserService:
    """
    Read-only data access for the admin user views.

    Every fetch declares the relations it resolves up front, so rendering
    a list of N users never issues per-user queries.
    """

    def loader_options(self, relations: Iterable[str] = USER_RELATIONS) -> list:
        options = []
        for name in relations:
            loader = _LOADERS.get(name)
            if loader is None:
                raise ValueError(f"Unknown user relation: {name!r}")
            options.append(loader())
        return options

    # ------------------------------------------------------------
    # Fetch all users, newest first
    # ------------------------------------------------------------
    def list_users(self, db: Session, relations: Iterable[str] = USER_RELATIONS) -> List[User]:
        users = (
            db.query(User)
            .options(*self.loader_options(relations))
            .order_by(User.created_at.desc(), User.id.desc())
            .all()
        )
        logger.debug("Loaded %d users", len(users))
        return users

    # ------------------------------------------------------------
    # Fetch single user by ID or raise NotFoundError
    # ------------------------------------------------------------
    def get_user(self, db: Session, user_id, relations: Iterable[str] = USER_RELATIONS) -> User:
        parsed_id = _parse_user_id(user_id)
        if parsed_id is None:
            raise NotFoundError("User", user_id)

        user = (
            db.query(User)
            .options(*self.loader_options(relations))
            .filter(User.id == parsed_id)
            .first()
        )
        if user is None:
            raise NotFoundError("User", user_id)
        return user


user_service = UserService()
