# inventory_tracker/main.py
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from inventory_tracker.api.error_handlers import register_exception_handlers
from inventory_tracker.api.routers import dashboard, inventory, movements, pc_models, staff
from inventory_tracker.core.config import settings
from inventory_tracker.core.logging import setup_logging
from inventory_tracker.core.metrics import export_metrics
from inventory_tracker.middleware import ObservabilityMiddleware, PayloadLimitMiddleware

# --- Models registration (needed so Alembic and create_all see every table) ---
import inventory_tracker.models.movement  # noqa: F401
import inventory_tracker.models.product   # noqa: F401
import inventory_tracker.models.staff     # noqa: F401

setup_logging()

TAGS_METADATA = [
    {"name": "movements", "description": "Inbound and outbound movements with their history."},
    {"name": "inventory", "description": "Stock listing, product id checks and lookups."},
    {"name": "staff", "description": "Staff who perform movements."},
    {"name": "pc-model-numbers", "description": "Registry of known PC model numbers."},
    {"name": "dashboard", "description": "Stock totals and recent activity."},
]

app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    description=(
        "Warehouse inventory tracking for serialized items.\n\n"
        "- **Inbound**: register a batch of new products under one inbound number.\n"
        "- **Outbound**: ship out a contiguous product id range under one outbound number.\n"
        "- **Inventory**: current stock per category."
    ),
    openapi_tags=TAGS_METADATA,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# --- Middlewares ---
app.add_middleware(PayloadLimitMiddleware)
app.add_middleware(ObservabilityMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

register_exception_handlers(app)

# --- Routers ---
app.include_router(movements.router, prefix=settings.API_PREFIX)
app.include_router(inventory.router, prefix=settings.API_PREFIX)
app.include_router(staff.router, prefix=settings.API_PREFIX)
app.include_router(pc_models.router, prefix=settings.API_PREFIX)
app.include_router(dashboard.router, prefix=settings.API_PREFIX)


@app.get("/metrics", include_in_schema=False)
def metrics() -> Response:
    payload, content_type = export_metrics()
    return Response(content=payload, media_type=content_type)


@app.get("/", include_in_schema=False)
def root():
    return {"status": "ok", "docs_url": "/docs"}
