"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from lessonshop.infrastructure import bootstrap
from lessonshop.infrastructure.http import lesson_routes, order_routes
from lessonshop.infrastructure.http.admin import AdminGateway
from lessonshop.infrastructure.http.errors import register_exception_handlers
from lessonshop.infrastructure.http.schemas import LoginRequest
from lessonshop.infrastructure.persistence.json_collection import DocumentStore
from lessonshop.infrastructure.settings import Settings


class LoginResponse(BaseModel):
    message: str
    adminKey: str


def create_app(settings: Settings, store: DocumentStore | None = None) -> FastAPI:
    """Build the app. *store* defaults to one persisting under ``settings.data_dir``."""
    app = FastAPI(title="Lesson Shop")
    app.state.store = store if store is not None else bootstrap.document_store(settings.data_dir)
    app.state.admin_gateway = AdminGateway.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.get("/", response_class=PlainTextResponse)
    def root() -> str:
        return "Backend is running"

    @app.post("/admin/login", response_model=LoginResponse)
    def admin_login(body: LoginRequest) -> LoginResponse:
        key = app.state.admin_gateway.login(body.username, body.password)
        return LoginResponse(message="Login successful", adminKey=key)

    app.include_router(lesson_routes.router)
    app.include_router(order_routes.router)

    if settings.images_dir.is_dir():
        app.mount("/images", StaticFiles(directory=settings.images_dir), name="images")

    return app
