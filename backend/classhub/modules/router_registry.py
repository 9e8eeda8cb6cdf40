"""Central router registry for module-oriented composition."""
from __future__ import annotations

from fastapi import FastAPI

from classhub.routers import assignments, classrooms, files, posts, users

USER_ROUTERS = [users.router]
CLASSROOM_ROUTERS = [classrooms.router, files.router, assignments.router]
POST_ROUTERS = [posts.router]

ALL_ROUTERS = USER_ROUTERS + CLASSROOM_ROUTERS + POST_ROUTERS


def include_all_routers(app: FastAPI) -> None:
    for router in ALL_ROUTERS:
        app.include_router(router)
