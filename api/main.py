from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from applications import router as applications_router
from awards import router as awards_router
from blogs import router as blogs_router
from core import config, db, errors
from core.logging_config import configure_logging, get_logger
from media import router as media_router
from products import router as products_router
from qna import router as qna_router
from sales_requests import router as sales_requests_router
from subscriptions import router as subscriptions_router

configure_logging(log_level=config.log_level(), json_logs=config.log_json())
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    await db.check_connection()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="Bullwork Mobility API", lifespan=lifespan)

# Browser clients of the marketing site call this API cross-origin.
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_allow_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

errors.setup_exception_handlers(app)

app.include_router(blogs_router.router, tags=["blogs"])
app.include_router(products_router.router, tags=["products"])
app.include_router(qna_router.router, tags=["qna"])
app.include_router(awards_router.router, tags=["awards"])
app.include_router(media_router.router, tags=["media"])
app.include_router(sales_requests_router.router, tags=["requests"])
app.include_router(applications_router.router, tags=["apply"])
app.include_router(subscriptions_router.router, tags=["subscribe"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "Welcome to Bullwork Mobility Backend API!"}


if __name__ == "__main__":
    logger.info("server_starting", host=config.server_host(), port=config.server_port())
    uvicorn.run(app, host=config.server_host(), port=config.server_port())
