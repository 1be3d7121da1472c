import logging
from fastapi import FastAPI
from biztime.api.exceptions import register_error_handler
from biztime.api.v1.routes import companies, invoices, industries, health
from biztime.core.config import LOG_LEVEL
from biztime.core.database import dispose_engine
from biztime.core.middleware.http_ctx import HttpContextMiddleware
from biztime.core.redis import create_redis


logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger("biztime")


async def lifespan(app: FastAPI):
    r = await create_redis()
    app.state.redis = r
    logger.info("BizTime API starting (audit stream %s)", "enabled" if r else "disabled")
    try:
        yield
    finally:
        if r is not None:
            await r.aclose()
        await dispose_engine()


app = FastAPI(title="BizTime API", lifespan=lifespan)
app.add_middleware(HttpContextMiddleware, request_id_header="X-Request-ID")
register_error_handler(app)
app.include_router(health.router)
app.include_router(companies.router)
app.include_router(invoices.router)
app.include_router(industries.router)
