from typing import Any, Callable, Optional

from fastapi import FastAPI


def create_test_app(
    routers,
    dependency_overrides: Optional[dict[Callable[..., Any], Callable[..., Any]]] = None,
    middlewares=None,
) -> FastAPI:
    """
    Create a FastAPI test application with the given routers.

    The application has no lifespan, so anything the lifespan would normally
    provide (the geolocation client, the visitor config) must be supplied
    through ``dependency_overrides``.

    Args:
        routers: A router or list of routers to include in the app.
        dependency_overrides: Optional mapping of provider -> replacement.
        middlewares: Optional list of (middleware_class, config_dict) tuples.

    Returns:
        FastAPI: A configured FastAPI application.

    Example:
        app = create_test_app(
            [visitors_router],
            dependency_overrides={get_visitor_config: lambda: config},
        )
    """
    app = FastAPI()

    from api.dependencies.rate_limits import setup_rate_limiter

    setup_rate_limiter(app)

    if middlewares:
        for middleware_class, middleware_config in middlewares:
            app.add_middleware(middleware_class, **middleware_config)

    if not isinstance(routers, list):
        routers = [routers]
    for router in routers:
        app.include_router(router)

    if dependency_overrides:
        app.dependency_overrides.update(dependency_overrides)

    return app
