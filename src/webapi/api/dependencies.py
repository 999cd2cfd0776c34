from fastapi import Request

from webapi.collections import DataContext


def get_context(request: Request) -> DataContext:
    # Set on app.state by create_app() or the lifespan handler
    return request.app.state.context
