"""Store construction for the running application."""
import logging

from schooldesk.config import settings
from schooldesk.seed import seed_store
from schooldesk.store import Store

logger = logging.getLogger(__name__)


async def init_store() -> Store:
    """Create the in-memory store, seeded with demo data unless disabled."""
    store = Store()
    if settings.seed_on_start:
        await seed_store(store)
    else:
        logger.info("%s starting with an empty store", settings.app_name)
    return store
