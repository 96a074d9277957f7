"""This file contains the app info dependency."""

from fastapi import Request

from hello_devops.settings import AppInfo


def get_app_info(request: Request) -> AppInfo:
    """Provide the AppInfo the serving application was built with."""
    return request.app.state.app_info
