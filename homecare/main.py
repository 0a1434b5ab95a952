import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

from .config import get_settings
from .logger import setup_logger

settings = get_settings()
setup_logger("homecare", settings.log_level)

from .db import engine, Base
from .api import router
from .seed import bootstrap_if_empty

log = logging.getLogger("homecare.main")


app = FastAPI(title="HOMECARE+ API", version="1.0.0")


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    log.info("%s %s", request.method, request.url.path)
    return await call_next(request)


@app.on_event("startup")
def on_startup():
    Base.metadata.create_all(bind=engine)
    if settings.bootstrap:
        log.info("Seeding reference data")
        bootstrap_if_empty()


@app.get("/")
async def root():
    return {"success": True, "message": "Welcome to HOMECARE+ API", "version": "1.0.0"}


app.include_router(router, prefix="/api")
