from __future__ import annotations

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pairchat.api.router import api_router
from pairchat.api.routes import translate
from pairchat.core.config import settings
from pairchat.core.logging import configure_logging
from pairchat.realtime import create_socket_app
import pairchat.realtime.events  # noqa: F401 - ensure handlers are registered

configure_logging(settings.debug)


fastapi_app = FastAPI(title=settings.project_name, debug=settings.debug)

fastapi_app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

fastapi_app.include_router(api_router, prefix=settings.api_prefix)
fastapi_app.include_router(translate.router, tags=["translate"])


@fastapi_app.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    return {"status": "ok"}


app = create_socket_app(fastapi_app)

# Re-export FastAPI application for tests if needed
api_app = fastapi_app


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
