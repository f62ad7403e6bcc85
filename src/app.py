"""
Person Records web application
Server-rendered list, create, edit and delete pages for person records
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from database.connection import try_init_database, close_database
from api.routes import health, people
from middleware.method_override import MethodOverrideMiddleware
from utils.error_handling import setup_error_handling
from utils.templates import STATIC_DIR

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    # An unreachable store is logged, not fatal; requests answer 503 until it is back
    await try_init_database()
    yield
    await close_database()

# FastAPI app initialization
app = FastAPI(
    title="Person Records",
    description="List, create, edit and delete person records",
    version="1.0.0",
    lifespan=lifespan
)

# Setup centralized error handling
setup_error_handling(app)

# Forms post with ?_method=PUT|DELETE; must see the request before routing
app.add_middleware(MethodOverrideMiddleware)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

@app.get("/", include_in_schema=False)
async def root():
    return RedirectResponse(url="/person", status_code=302)

# Include routes
app.include_router(health.router, tags=["Health"])
app.include_router(people.router, prefix="/person", tags=["People"])
