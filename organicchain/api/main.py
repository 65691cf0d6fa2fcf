"""
FastAPI app assembly: logging, middleware and router wiring.

Also hosts the landing redirect and health check, which span every role.
"""
import logging
import os

from fastapi import FastAPI, Depends, status
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, RedirectResponse

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)


from organicchain.api.deps import get_current_user_context_or_guest
from organicchain.api.profiles import router as profiles_router, role_options
from organicchain.api.farms import router as farms_router
from organicchain.api.products import router as products_router
from organicchain.api.orders import router as orders_router
from organicchain.api.deliveries import router as deliveries_router
from organicchain.api.admin import router as admin_router
from organicchain.api.ledger import router as ledger_router
from organicchain.utils.runtime import dev_mode_requested

# Database schema is managed by Alembic migrations (SQLite test databases are created from metadata).

app = FastAPI(
    title="OrganicChain Marketplace Service",
    description="Farm-to-table marketplace with role dashboards and a traceability ledger of harvest, order and delivery events.",
    version="1.0.0",
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False

origins = [
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:8000",
]
origins.extend(o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip())

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Middleware: enforce read-only for unauthenticated requests
@app.middleware("http")
async def enforce_readonly_for_guests(request: Request, call_next):
    if request.method in ("POST", "PUT", "PATCH", "DELETE") and not dev_mode_requested():
        h = request.headers
        user_present = (
            h.get("x-auth-request-user")
            or h.get("x-auth-request-email")
            or h.get("x-forwarded-user")
            or h.get("x-forwarded-email")
        )
        if not user_present:
            return JSONResponse(
                {"detail": "Guest mode is read-only. Sign in to perform changes."},
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
    return await call_next(request)


@app.get("/")
def landing(user_context = Depends(get_current_user_context_or_guest)):
    """Send signed-in users with a role to their dashboard; everyone else gets the role picker."""
    user, current_user = user_context
    dashboard = (current_user or {}).get("dashboard")
    if dashboard:
        return RedirectResponse(url=dashboard, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
    return {
        "authenticated": user is not None,
        "role": None,
        "roles": [option.model_dump(mode="json") for option in role_options()],
    }


app.include_router(profiles_router)
app.include_router(farms_router)
app.include_router(products_router)
app.include_router(orders_router)
app.include_router(deliveries_router)
app.include_router(admin_router)
app.include_router(ledger_router)


@app.get("/health")
def health_check():
    return {"status": "ok"}
