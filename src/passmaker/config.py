import sys

from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PASSMAKER_")

    log_level: str = "WARNING"
    log_enabled: bool = False
    cache_max_powers: bool = True
    precomputed_max_powers: bool = True
    # chain iterations allowed beyond the padded bound (trim mode, leet merges)
    extra_chain_iterations: int = 8
    default_hash_algorithm: str = "md5"


config = Config()  # type: ignore


def configure_logging(level: str | None = None) -> None:
    """Route passmaker logs to stderr.

    `diagnose` stays off so loguru never renders local variables, which would
    include master secrets.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=level or config.log_level,
        backtrace=True,
        diagnose=False,
    )
    logger.enable("passmaker")
