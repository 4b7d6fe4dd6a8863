import logging
import sys
import structlog
import pydantic
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STOP_TOKEN = "\\stop_running_command"


class Config(BaseSettings):
    log_level: str = pydantic.Field(
        "warning",
        description="Logging level.",
    )
    log_file: str = pydantic.Field(
        "STDERR",
        description="Path to the log file.",
    )
    log_format: str = pydantic.Field(
        "text",
        description="Log format.",
    )
    stop_token: str = pydantic.Field(
        DEFAULT_STOP_TOKEN,
        description="Line that aborts the running command.",
    )
    model_config = SettingsConfigDict(env_prefix="motorpool_")


def load_config(**overrides) -> Config:
    # TODO: read overrides from a toml file alongside env
    config = Config(**overrides)
    # configure log output
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(),
    ]
    if config.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    # stdout belongs to the shell; stderr is looked up per logger so a
    # swapped stream (e.g. under CliRunner) is honoured
    if config.log_file == "STDERR":
        factory = lambda *args: structlog.PrintLogger(file=sys.stderr)  # noqa: E731
    else:
        factory = structlog.PrintLoggerFactory(file=open(config.log_file, "a"))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, config.log_level.upper())
        ),
        logger_factory=factory,
    )
    return config
