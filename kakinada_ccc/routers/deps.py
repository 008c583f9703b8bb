"""
Kakinada CCC — Router dependencies
"""
from fastapi import HTTPException, Request

from kakinada_ccc.config import Settings
from kakinada_ccc.controller import CommandCenter


def get_center(request: Request) -> CommandCenter:
    """The app's single CommandCenter, created in create_app()."""
    return request.app.state.center


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def not_found(exc: LookupError) -> HTTPException:
    return HTTPException(status_code=404, detail=str(exc.args[0]) if exc.args else "Not found")
