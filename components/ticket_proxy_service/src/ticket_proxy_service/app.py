"""FastAPI application - health check, create-ticket, get-ticket and the 404 fallback."""

import logging
from contextlib import asynccontextmanager
from typing import Annotated, Any

import uvicorn
from fastapi import Body, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from jira_client_impl.jira_impl import JiraClient
from ticket_proxy_service.config import ProxySettings
from ticket_tracker_interface.client import TicketTrackerClient
from ticket_tracker_interface.result import UpstreamResult
from ticket_tracker_interface.ticket import TicketRequest

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

HEALTH_MESSAGE = "Jira backend running"

logger = logging.getLogger(__name__)


def build_client(settings: ProxySettings) -> JiraClient:
    """Return the JiraClient described by ``settings``. Credentials are encoded here, once."""
    return JiraClient(
        settings.jira_base,
        settings.jira_email,
        settings.jira_api_token.get_secret_value(),
        settings.project_key,
        description_format=settings.description_format,
        timeout=settings.upstream_timeout,
    )


def get_tracker_client(request: Request) -> TicketTrackerClient:
    return request.app.state.tracker_client


def _respond(result: UpstreamResult, operation: str) -> Any:
    if result.ok:
        return {"success": True, **result.value.to_dict()}
    logger.error("%s ERROR (%s): %s", operation, result.error_kind.value, result.error)
    return JSONResponse(status_code=500, content={"success": False, "error": result.error})


def create_app(settings: ProxySettings, client: TicketTrackerClient | None = None) -> FastAPI:
    """Build the proxy application.

    Args:
        settings: Frozen process settings, shared read-only by every request.
        client:   Tracker client to use; built from ``settings`` when omitted.
    """
    tracker_client = client if client is not None else build_client(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Proxying %s (project %s, %s descriptions) on port %s",
            settings.jira_base,
            settings.project_key,
            settings.description_format.value,
            settings.port,
        )
        yield
        logger.info("Shutting down, closing upstream connections")
        tracker_client.close()

    app = FastAPI(title="Jira Ticket Proxy", version="1.0.0", lifespan=lifespan)
    app.state.tracker_client = tracker_client

    origins = settings.cors_origin_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # credentials cannot be combined with a wildcard origin
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        logger.info("[REQ] %s %s", request.method, request.url.path)
        return await call_next(request)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # a known path with the wrong method is treated like an unknown path
        if exc.status_code in (404, 405):
            logger.info("[404] %s %s", request.method, request.url.path)
            return JSONResponse(status_code=404, content={"success": False, "error": "Not Found"})
        return JSONResponse(status_code=exc.status_code, content={"success": False, "error": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected body for %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"success": False, "error": "Invalid JSON body"})

    @app.get("/")
    async def health() -> dict:
        """Static liveness payload; never touches Jira."""
        return {"status": "ok", "message": HEALTH_MESSAGE}

    # plain def: FastAPI runs these in its threadpool while they wait on Jira
    @app.post("/create-ticket")
    def create_ticket(
        body: Annotated[dict[str, Any] | None, Body()] = None,
        client: TicketTrackerClient = Depends(get_tracker_client),
    ):
        result = client.create_ticket(TicketRequest.from_body(body or {}))
        return _respond(result, "CREATE TICKET")

    @app.post("/get-ticket")
    def get_ticket(
        body: Annotated[dict[str, Any] | None, Body()] = None,
        client: TicketTrackerClient = Depends(get_tracker_client),
    ):
        ticket_key = (body or {}).get("ticketKey")
        result = client.get_ticket_status(ticket_key)
        return _respond(result, "GET TICKET")

    return app


def run() -> None:
    """Console entry point: read settings from the environment and serve."""
    settings = ProxySettings()
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
