"""Initialize the database before starting Uvicorn workers: `python init.py && uvicorn app.main:app --workers 4`"""

import logging
import os

from app.app import init_db
from app.core.utils.config import construct_prod_settings
from app.core.utils.log import LogConfig

# `get_settings()` is cached and would be reused by the workers, we build the settings directly
settings = construct_prod_settings()

LogConfig().initialize_loggers(settings=settings)

filmes_error_logger = logging.getLogger("filmes.error")

filmes_error_logger.warning(
    "Initializing the database before starting Uvicorn.",
)

init_db(
    settings=settings,
    filmes_error_logger=filmes_error_logger,
    drop_db=False,
)

if os.environ.get("FILMES_INIT_DB") != "False":
    filmes_error_logger.warning(
        "FILMES_INIT_DB is not set to False, each worker will check the database again on startup.",
    )
