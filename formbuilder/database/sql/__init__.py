import os
from pathlib import Path

from formbuilder import log

import asyncpg

SCHEMA_FILE = Path(__file__).with_name("schema.sql")

connection_pool = None


async def connect():
    try:
        return await asyncpg.create_pool(
            min_size=1,
            max_size=20,
            command_timeout=60,
            host=os.getenv("POSTGRES_DATABASE_HOST", "localhost"),
            port=int(os.getenv("POSTGRES_DATABASE_PORT", 5432)),
            user=os.getenv("POSTGRES_DATABASE_USER"),
            password=os.getenv("POSTGRES_DATABASE_PASSWORD"),
            database=os.getenv("POSTGRES_DATABASE_NAME", "form_builder"),
            server_settings={
                'search_path': os.getenv('POSTGRES_DATABASE_SCHEMA')
            } if os.getenv('POSTGRES_DATABASE_SCHEMA') else None
        )
    except Exception as err:
        raise ConnectionError("Failed to create connection") from err


async def get_connection() -> asyncpg.Pool:
    """Function to get a connection pool if not 1 already

    Returns:
        asyncpg.Pool: Pool of connections to the database
    """

    global connection_pool
    if not connection_pool:
        log.info("creating connection pool")
        connection_pool = await connect()
    return connection_pool


async def close_connection():
    """Function to close the connection pool if one was created"""

    global connection_pool
    if connection_pool:
        log.info("closing connection pool")
        await connection_pool.close()
        connection_pool = None


async def create_schema():
    """Function to create the form tables and seed the question types

    Every statement in schema.sql is idempotent, so running this against an
    existing database leaves it untouched.
    """

    db_pool = await get_connection()
    async with acquire_connection(db_pool) as conn:
        await conn.execute(SCHEMA_FILE.read_text())
    log.info("database schema is in place")


class acquire_connection:
    def __init__(self, pool):
        self.pool = pool
        self.conn = None

    async def __aenter__(self):
        self.conn = await self.pool.acquire()
        return self.conn

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.pool.release(self.conn)
