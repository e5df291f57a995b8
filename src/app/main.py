from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.routers import get_routers
from app.shared import Logger, load_config
from app.shared.db import init_db
from app.shared.http import register_exception_handlers

logger = Logger(__name__).get_logger()

config = load_config()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    init_db()
    yield


# ================================================================================
#       FastAPI Setup
# ================================================================================
app = FastAPI(
    title=config.api.title,
    version=config.api.version,
    description=config.api.description,
    license_info={"name": config.api.license_name, "url": config.api.license_url},
    lifespan=lifespan,
)

for router in get_routers():
    app.include_router(router)

origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


# ================================================================================
#       Command Line
# ================================================================================
def welcome():
    # Log server banner
    for line in config.general.title.split("\n"):
        logger.info(line)

    logger.info(
        "Starting %s %s, docs at http://%s:%s/docs",
        config.api.title,
        config.api.version,
        config.network.host,
        config.network.port,
    )


def main(argv=None):
    welcome()

    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=config.network.host,
        port=config.network.port,
        reload=config.network.reload,
    )


if __name__ == "__main__":
    main()
