from enum import Enum
from pathlib import Path

from pydantic_settings import BaseSettings


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    env: Env = Env.local
    html_dir: Path = Path("templates")
    assets_dir: Path = Path("assets")
    # Served from assets_dir unless a full url is given.
    catalog_path: str = "data.json"
    catalog_url: str | None = None
    catalog_timeout: float = 20
    store_path: Path = Path("recipe-box.json")
    log_level: str = "INFO"
