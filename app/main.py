import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.config import settings
from app.core.cors import CORSHeadersMiddleware
from app.core.errors import BadRequestError, GatewayError, StoreError
from app.core.limiter import limiter
from app.modules.teams import routes as teams_routes
from app.modules.tournaments import routes as tournaments_routes
from app.modules.registrations import routes as registrations_routes
from app.modules.status import routes as status_routes

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    redirect_slashes=False,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(GatewayError)
async def gateway_exception_handler(request: Request, exc: GatewayError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_envelope())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
    error = BadRequestError()
    return JSONResponse(status_code=error.status_code, content=error.to_envelope())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    return JSONResponse(status_code=500, content=StoreError().to_envelope())


module_routers = [
    status_routes.router,
    teams_routes.router,
    tournaments_routes.router,
    registrations_routes.router,
]

app.add_middleware(SlowAPIMiddleware)
app.add_middleware(CORSHeadersMiddleware, routers=module_routers, prefix=settings.api_prefix)

# Include module routes
for module_router in module_routers:
    app.include_router(module_router, prefix=settings.api_prefix)


@app.on_event("startup")
async def startup_event():
    logger.info("Application startup")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Application shutdown")


@app.get("/")
@limiter.exempt
async def root():
    return {"message": f"Welcome to {settings.app_name}", "status": "healthy"}


@app.get("/ready")
@limiter.exempt
async def ready():
    """Readiness probe: does not contact Supabase; use /api/health for that."""
    return {"status": "ready"}
