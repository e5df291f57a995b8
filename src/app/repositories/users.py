from collections.abc import Sequence
from uuid import UUID

from sqlmodel import Session, col, select

from app.models.schema import User


class UserRepository:
    """Save/find/delete access to the ``users`` table."""

    def __init__(self, session: Session):
        self.session = session

    def save(self, user: User) -> User:
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def find_by_id(self, user_id: UUID) -> User | None:
        return self.session.get(User, user_id)

    def find_all(self) -> Sequence[User]:
        return self.session.exec(select(User).order_by(User.id)).all()

    def find_by_email(self, email: str) -> User | None:
        return self.session.exec(select(User).where(User.email == email)).first()

    def find_by_active_true(self) -> Sequence[User]:
        statement = select(User).where(col(User.active).is_(True))
        return self.session.exec(statement.order_by(User.id)).all()

    def exists_by_email(self, email: str) -> bool:
        return self.find_by_email(email) is not None

    def delete(self, user: User) -> None:
        self.session.delete(user)
        self.session.commit()
