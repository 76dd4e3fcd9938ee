"""User repository for database operations.

This module provides the data access layer for users. Each operation opens
its own session against the engine and releases it before returning; every
failure leaves the repository as exactly one member of the error taxonomy.
"""

import time

from sqlalchemy import insert
from sqlalchemy.engine import Engine
from sqlmodel import Session, select
from starlette.concurrency import run_in_threadpool

from ..exceptions import DatabaseError, UserNotFoundError
from ..logging_config import log_database_operation
from ..models.user import User


class UserRepository:
    """Repository for user database operations.

    Operations are ``async`` and run the blocking database work in a worker
    thread, so one in-flight call never holds up another.
    """

    def __init__(self, engine: Engine) -> None:
        """Initialize user repository with a database engine.

        Args:
            engine: Engine used to open one session per operation
        """
        self.engine = engine

    async def create(self, user: User) -> User:
        """Insert a new user and return it as stored.

        Args:
            user: Fully formed user, timestamps included

        Returns:
            User rebuilt from the row the store returned

        Raises:
            DatabaseError: If the insert fails for any reason, including a
                duplicate identifier
        """
        return await run_in_threadpool(self._create, user)

    async def find_by_id(self, user_id: str) -> User:
        """Get user by ID.

        Args:
            user_id: Identifier to search for

        Returns:
            The stored user

        Raises:
            UserNotFoundError: If no user has this identifier
            DatabaseError: If the query fails
        """
        return await run_in_threadpool(self._find_by_id, user_id)

    def _create(self, user: User) -> User:
        statement = (
            insert(User.__table__)
            .values(
                id=user.id,
                name=user.name,
                created_at=user.created_at,
                updated_at=user.updated_at,
            )
            .returning(*User.__table__.columns)
        )
        start_time = time.time()
        try:
            with Session(self.engine) as session:
                try:
                    row = session.execute(statement).one()
                    session.commit()
                except Exception:
                    session.rollback()
                    raise
        except Exception as e:
            log_database_operation(
                "INSERT", "users", success=False,
                duration=time.time() - start_time, error=str(e), user_id=user.id,
            )
            raise DatabaseError(f"Database error: {str(e)}", cause=e) from e

        log_database_operation(
            "INSERT", "users", duration=time.time() - start_time, user_id=user.id
        )
        return User(**row._mapping)

    def _find_by_id(self, user_id: str) -> User:
        statement = select(User).where(User.id == user_id)
        start_time = time.time()
        try:
            with Session(self.engine) as session:
                user = session.exec(statement).first()
        except Exception as e:
            log_database_operation(
                "SELECT", "users", success=False,
                duration=time.time() - start_time, error=str(e), user_id=user_id,
            )
            raise DatabaseError(f"Database error: {str(e)}", cause=e) from e

        log_database_operation(
            "SELECT", "users", duration=time.time() - start_time,
            user_id=user_id, found=user is not None,
        )
        if user is None:
            raise UserNotFoundError(user_id)
        return user
