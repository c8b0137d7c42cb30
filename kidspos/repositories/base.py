from __future__ import annotations

from typing import Generic, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, scoped_session

ModelT = TypeVar("ModelT")


class BaseRepository(Generic[ModelT]):
    """
    Shared persistence helpers over the Flask-SQLAlchemy scoped session.

    Writes take `commit=False` so a service can group several of them into
    one transaction and commit once.
    """
    model: type

    def __init__(self, session: Session | scoped_session):
        self.session = session

    def query(self):
        return self.session.query(self.model)

    def find_by_id(self, pk: int) -> ModelT | None:
        return self.query().filter_by(id=pk).first()

    def add(self, obj: ModelT, *, commit: bool = True) -> ModelT:
        self.session.add(obj)
        if commit:
            self.commit()
        else:
            self.session.flush()
        return obj

    def delete(self, obj: ModelT, *, commit: bool = True) -> None:
        self.session.delete(obj)
        if commit:
            self.commit()
        else:
            self.session.flush()

    def commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise

    def rollback(self) -> None:
        self.session.rollback()
