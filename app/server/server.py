from fastapi import FastAPI

from api.router import api_router
from api.dependencies.rate_limits import setup_rate_limiter
from server.lifespan import lifespan
from server.request_context import RequestContextMiddleware

handler = FastAPI(lifespan=lifespan)
setup_rate_limiter(handler)

handler.add_middleware(RequestContextMiddleware)

handler.include_router(api_router)
