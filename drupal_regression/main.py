import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI
from sqlalchemy import text
from sqlalchemy.engine import make_url
from alembic.config import Config
from alembic import command
from drupal_regression.core.config import settings
from drupal_regression.core.config_store import ConfigFactory
from drupal_regression.core.logging import configure_logging
from drupal_regression.api.deps import MODULE_CONFIG, get_content_model
from drupal_regression.api.routes import router as api_router
from drupal_regression.db.session import engine
from drupal_regression.entity.field_manager import ContentModel, EntityTypeBundleInfo
from drupal_regression.entity.manager import CONTENT_ENTITY_TYPES

configure_logging()
log = logging.getLogger(__name__)


def wait_for_database(max_retries: int = 30, retry_delay: float = 1.0) -> None:
    """Wait for the entity store database to accept connections."""
    database = make_url(settings.database_url).render_as_string(hide_password=True)
    for attempt in range(max_retries):
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            log.info("Entity store reachable at %s", database)
            return
        except Exception as e:
            if attempt < max_retries - 1:
                log.warning("Entity store not ready, retrying in %s seconds (attempt %d/%d): %s",
                            retry_delay, attempt + 1, max_retries, e)
                time.sleep(retry_delay)
            else:
                log.error("Entity store %s unreachable after %d attempts", database, max_retries)
                raise


def run_migrations() -> None:
    """Upgrade the content_entities and key_value tables to head."""
    try:
        log.info("Upgrading content and state tables...")
        alembic_cfg = Config("alembic.ini")
        command.upgrade(alembic_cfg, "head")
        log.info("Content and state tables are up to date")
    except Exception as e:
        log.error("Content table migration failed: %s", e, exc_info=True)
        raise


def log_regression_status(config_factory: ConfigFactory, content_model: ContentModel) -> bool:
    """Log the bundles a generation pass will cover and whether the endpoints are open."""
    bundle_info = EntityTypeBundleInfo(content_model)
    for entity_type in CONTENT_ENTITY_TYPES:
        bundles = bundle_info.get_bundle_info(entity_type)
        log.info("%d bundles available for generation", len(bundles), extra={"entity_type": entity_type})

    enabled = bool(config_factory.get(MODULE_CONFIG).get("enabled"))
    if enabled:
        log.warning("Regression content endpoints are enabled (env=%s)", settings.app_env)
    else:
        log.info("Regression content endpoints are disabled (env=%s)", settings.app_env)
    return enabled


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    try:
        wait_for_database()
        run_migrations()
        log_regression_status(ConfigFactory.from_settings(settings), get_content_model())
    except Exception as e:
        log.error("Regression API startup failed: %s", e, exc_info=True)
        raise
    yield
    log.info("Regression API stopped")


app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    lifespan=lifespan
)
app.include_router(api_router)
