from __future__ import annotations
import os
import logging
import typing as t
from dataclasses import dataclass, replace

from dotenv import load_dotenv

from .state import DEFAULT_PAGE_SIZE
from .validation import parse_int, validate_page_size

load_dotenv()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILE = "pagination.log"


@dataclass(frozen=True)
class PagerConfig:
    default_page_size: int = DEFAULT_PAGE_SIZE
    log_level: str = "INFO"
    log_dir: str = "logs"

    @classmethod
    def from_env(cls, environ: t.Mapping[str, str] | None = None) -> "PagerConfig":
        env = os.environ if environ is None else environ
        size = parse_int(env.get("PAGER_DEFAULT_PAGE_SIZE", str(DEFAULT_PAGE_SIZE)))
        return cls(
            default_page_size=validate_page_size(size),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            log_dir=env.get("LOG_DIR", "logs"),
        )

    def with_page_size(self, size: int | str) -> "PagerConfig":
        return replace(self, default_page_size=validate_page_size(parse_int(size)))


def configure_logging(config: PagerConfig) -> None:
    os.makedirs(config.log_dir, exist_ok=True)
    logging.basicConfig(
        level=config.log_level,
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(os.path.join(config.log_dir, LOG_FILE)),
            logging.StreamHandler(),
        ],
    )
