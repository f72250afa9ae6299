import logging
import multiprocessing
import os

from app.app import init_db
from app.core.utils.config import construct_prod_settings
from app.core.utils.log import LogConfig

# Gunicorn configuration. Run with `gunicorn app.main:app --worker-class uvicorn.workers.UvicornWorker`
# The `on_starting` hook creates or migrates the database once, before the workers are forked

host = os.getenv("HOST", "0.0.0.0")
port = os.getenv("PORT", "8000")
bind = os.getenv("BIND", f"{host}:{port}")

web_concurrency_str = os.getenv("WEB_CONCURRENCY")
if web_concurrency_str:
    workers = int(web_concurrency_str)
else:
    workers = max(multiprocessing.cpu_count(), 2)

loglevel = os.getenv("LOG_LEVEL", "info")
accesslog = os.getenv("ACCESS_LOG", "-") or None
errorlog = os.getenv("ERROR_LOG", "-") or None
graceful_timeout = int(os.getenv("GRACEFUL_TIMEOUT", "120"))
timeout = int(os.getenv("TIMEOUT", "120"))
keepalive = int(os.getenv("KEEP_ALIVE", "5"))


def on_starting(server) -> None:
    """
    Called just before the master process is initialized, with the gunicorn.arbiter.Arbiter instance.

    See https://docs.gunicorn.org/en/stable/settings.html#on-starting
    """
    settings = construct_prod_settings()

    # Workers inherit the environment of the arbiter and won't initialize the database again
    os.environ["FILMES_INIT_DB"] = "False"

    LogConfig().initialize_loggers(settings=settings)

    filmes_error_logger = logging.getLogger("filmes.error")

    filmes_error_logger.warning(
        "Starting Gunicorn server and initializing the database.",
    )

    init_db(
        settings=settings,
        filmes_error_logger=filmes_error_logger,
        drop_db=False,
    )
