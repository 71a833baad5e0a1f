import logging

import uvicorn

from .logs import setup_logging
from .settings import settings

logger = logging.getLogger("capi_search")

def main():
    setup_logging(settings.LOG_LEVEL)
    logger.info("Server is running on http://%s:%s", settings.API_HOST, settings.API_PORT)
    uvicorn.run("capi_search.main:app", host=settings.API_HOST, port=settings.API_PORT, log_config=None)

if __name__ == "__main__":
    main()
