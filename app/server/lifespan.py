from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

import httpx
from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.clients.ip_api import IpApiClient
from infrastructure.logging.setup import configure_logging, get_module_logger
from infrastructure.services import get_settings, get_visitor_config

if TYPE_CHECKING:
    from infrastructure.configuration import Settings, VisitorConfig


def _get_logger(settings: "Settings") -> BoundLogger:
    configure_logging(settings=settings)
    return get_module_logger()


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def _log_visitor_config(config: "VisitorConfig", logger: BoundLogger) -> None:
    logger.info(
        "visitor_config_loaded",
        target_url=config.target_url,
        log_path=str(config.log_path),
        tail_lines=config.tail_lines,
        timezone=str(config.timezone),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)

    visitor_config = get_visitor_config()
    app.state.visitor_config = visitor_config
    _log_visitor_config(visitor_config, logger)

    http_client = httpx.AsyncClient()
    app.state.ip_api_client = IpApiClient.from_settings(settings, http_client)

    yield

    logger.info("application_shutdown")

    await http_client.aclose()
    logger.info("http_client_closed")
