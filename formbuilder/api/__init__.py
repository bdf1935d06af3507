from contextlib import asynccontextmanager
from fastapi import FastAPI
import logging
import os

from formbuilder.database.sql import create_schema, close_connection

# set up initial app components
APP_NAME = os.getenv("APP_NAME")
if not APP_NAME:
    raise ValueError("Must supply an 'APP_NAME' environment variable")

APP_VERSION = os.getenv("APP_VERSION")
if not APP_VERSION:
    raise ValueError("Must supply an 'APP_VERSION' environment variable")

# set up logging
log = logging.getLogger("formbuilder_api")
log.info(f"Initilizing application {APP_NAME}")

OPENAPI_SERVER_URL = os.getenv("OPENAPI_SERVER_URL")
if not OPENAPI_SERVER_URL:
    log.info("OPENAPI_SERVER_URL defaulting to '/'")
    OPENAPI_SERVER_URL = '/'

OPENAPI_URL = f'{OPENAPI_SERVER_URL}openapi.json'
log.info(f"OPENAPI_URL set to {OPENAPI_URL}")

CLIENT_URL = os.getenv("CLIENT_URL", "http://localhost:3000")


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info("Starting the API")
    if os.getenv("POSTGRES_INIT_SCHEMA", "").lower() in ("1", "true", "yes"):
        await create_schema()
    yield
    log.info("Shutting down")
    await close_connection()


# app init
app = FastAPI(
    title=APP_NAME,
    version=APP_VERSION,
    openapi_url=OPENAPI_URL,
    lifespan=lifespan
)
