"""Store handle dependency."""

from fastapi import Request

from infrastructure.database.session import Database


def get_database(request: Request) -> Database:
    """Return the database opened by the application lifespan."""
    return request.app.state.database  # type: ignore[no-any-return]
