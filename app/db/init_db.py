import logging

import psycopg2
from psycopg2 import sql
from psycopg2.extensions import ISOLATION_LEVEL_AUTOCOMMIT
from sqlalchemy.engine import make_url

from app.core.config import settings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_database():
    """Create the Postgres database named in DATABASE_URL if it doesn't exist."""
    url = make_url(settings.DATABASE_URL)
    if not url.drivername.startswith("postgresql"):
        logger.info("Skipping database bootstrap for %s backend.", url.drivername)
        return

    try:
        # Connect to the maintenance database to check/create the target DB
        con = psycopg2.connect(
            user=url.username or settings.POSTGRES_USER,
            password=url.password or settings.POSTGRES_PASSWORD,
            host=url.host or settings.POSTGRES_SERVER,
            port=url.port or settings.POSTGRES_PORT,
            dbname="postgres"
        )
        con.set_isolation_level(ISOLATION_LEVEL_AUTOCOMMIT)
        cur = con.cursor()

        db_name = url.database or settings.POSTGRES_DB
        cur.execute("SELECT 1 FROM pg_catalog.pg_database WHERE datname = %s", (db_name,))
        exists = cur.fetchone()

        if not exists:
            logger.info("Database %s does not exist. Creating...", db_name)
            cur.execute(sql.SQL("CREATE DATABASE {}").format(sql.Identifier(db_name)))
            logger.info("Database %s created successfully.", db_name)
        else:
            logger.info("Database %s already exists.", db_name)

        cur.close()
        con.close()
    except psycopg2.Error as e:
        # The target DB may already exist and the maintenance DB be off-limits
        logger.error("Error creating database: %s", e)

if __name__ == "__main__":
    create_database()
