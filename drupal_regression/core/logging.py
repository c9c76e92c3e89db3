import logging
import sys

from drupal_regression.core.config import settings


class ContextFormatter(logging.Formatter):
    """Custom formatter that handles optional entity_type and bundle fields."""
    def format(self, record):
        # Add default values for entity_type and bundle if not present
        if not hasattr(record, 'entity_type'):
            record.entity_type = '-'
        if not hasattr(record, 'bundle'):
            record.bundle = '-'
        return super().format(record)


def configure_logging() -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ContextFormatter(
        "%(asctime)s %(levelname)s %(name)s [entity_type=%(entity_type)s bundle=%(bundle)s] - %(message)s"
    ))
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        handlers=[handler],
    )
