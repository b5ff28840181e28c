import os
from fastapi import FastAPI, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

from .logging_conf import configure_logging
from .database import Stores, get_stores, get_auth_gate
from .inventory_models import InventoryItem
from .inventory_crud import find_inventory_item_by_barcode_or_id
from .summary_utils import summarize_inventory
from .auth_routes import router as auth_router, require_session
from .inventory_routes import router as inventory_router
from .license_routes import router as license_router
from .mobile_line_routes import router as mobile_line_router
from .order_routes import router as order_router
from .entrega_routes import router as entrega_router
from .users_routes import router as users_router
load_dotenv()

service_name = os.getenv("SERVICE_NAME", "inventory_sentinel")
logger = configure_logging(service_name)

app = FastAPI(title="Inventory Sentinel API")
app.include_router(auth_router)
app.include_router(inventory_router)
app.include_router(license_router)
app.include_router(mobile_line_router)
app.include_router(order_router)
app.include_router(entrega_router)
app.include_router(users_router)

@app.on_event("startup")
def on_startup():
    stores = get_stores()
    logger.info("startup", extra={
        "items": stores.inventory.count(),
        "users": stores.users.count(),
        "session_file": get_auth_gate().storage.path.name,
    })

@app.middleware("http")
async def unexpected_errors(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception:
        logger.exception("unhandled error", extra={"path": request.url.path})
        return JSONResponse(status_code=500, content={"detail": "internal error"})

@app.get("/health")
def health():
    return {"status": "ok", "service": service_name}

@app.get("/api/dashboard/summary", dependencies=[Depends(require_session)])
def dashboard_summary(stores: Stores = Depends(get_stores)):
    return summarize_inventory(stores)

@app.get("/api/scan/{query}", response_model=InventoryItem, dependencies=[Depends(require_session)])
def scan(query: str, stores: Stores = Depends(get_stores)):
    """Look up an item by scanned barcode or by asset id."""
    item = find_inventory_item_by_barcode_or_id(stores, query)
    if not item:
        raise HTTPException(status_code=404, detail=f"No item with barcode or id {query}")
    return item
