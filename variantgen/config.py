from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union
from dotenv import find_dotenv, load_dotenv
from .utils import parse_log_level, safe_number


def load_env() -> None:
    load_dotenv(find_dotenv(usecwd=True))


load_env()


@dataclass
class Settings:
    workspace_path: Path = Path("variantgen.json")
    price_default: Union[int, float] = 0
    stock_default: int = 0
    default_brand_name: str = "No Brand"
    log_level: str = "INFO"


def _env_number(name: str, default: Union[int, float]) -> Union[int, float]:
    raw: Optional[str] = os.getenv(name)
    if raw is None:
        return default
    return safe_number(raw, default)


def get_settings() -> Settings:
    return Settings(
        workspace_path=Path(os.getenv("WORKSPACE_PATH", "variantgen.json")),
        price_default=_env_number("PRICE_DEFAULT", 0),
        stock_default=int(_env_number("STOCK_DEFAULT", 0)),
        default_brand_name=os.getenv("DEFAULT_BRAND_NAME", "No Brand"),
        log_level=parse_log_level(os.getenv("LOG_LEVEL")),
    )
