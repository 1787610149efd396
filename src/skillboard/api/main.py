"""
FastAPI application - serves the simulated skills backend over real HTTP.

Useful for poking at the mock API with curl or Swagger. Shares the request
interpreter and response simulator with the in-process transport, so both
answer identically.
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from skillboard.integrations.contracts.interfaces import KeyValueStorage, RequestDescriptor
from skillboard.mock_api.factory import build_simulator
from skillboard.mock_api.request_interpreter import interpret_request, normalize_prefix
from skillboard.utils.config_loader import MockApiConfig, load_mock_api_config

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

MOCK_METHODS = ["GET", "POST", "PATCH", "DELETE"]


def create_app(config: Optional[MockApiConfig] = None, storage: Optional[KeyValueStorage] = None) -> FastAPI:
    config = config or load_mock_api_config()
    simulator = build_simulator(config, storage)
    prefix = normalize_prefix(config.api_prefix)

    app = FastAPI(
        title="Skillboard Mock API",
        description="Locally simulated skills and badges backend",
        version="1.0.0",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health():
        storage_ok = simulator.store.storage.ping()
        return {"status": "healthy" if storage_ok else "degraded", "storage": storage_ok}

    @app.api_route(prefix + "/{path:path}", methods=MOCK_METHODS)
    async def mock_api(path: str, request: Request):
        body = await request.body()
        descriptor = RequestDescriptor(
            method=request.method,
            path=request.url.path,
            body=body or None,
            headers=dict(request.headers),
        )
        operation = interpret_request(descriptor, prefix)
        simulated = await simulator.handle(operation)
        if simulated.data is None:
            return Response(status_code=simulated.status)
        return JSONResponse(status_code=simulated.status, content=simulated.data)

    logger.info("Skillboard mock API mounted at %s/", prefix)
    return app


app = create_app()
