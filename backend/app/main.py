# backend/app/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.auth_routes import router as auth_router
from app.api.routes import router as admin_router
from app.core.config import settings
from app.core.database import Base, SessionLocal, engine
from app.core.seed import seed_reference_data_if_empty

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("hotel.api")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    # dev convenience; production schemas come from alembic
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_reference_data_if_empty(db)
    finally:
        db.close()
    logger.info("Hotel admin API ready (env=%s)", settings.app_env)
    yield


app = FastAPI(title="Hotel Admin API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["Authorization", "Content-Type"],
)

app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
app.include_router(admin_router, prefix="/api/admin", tags=["admin"])


@app.get("/health")
def health():
    return {"status": "ok"}
