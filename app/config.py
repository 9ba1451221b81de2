# app/config.py

import os
from typing import Literal

from pydantic import BaseModel


class Settings(BaseModel):
  app_env: Literal["development", "testing", "production"] = "development"
  log_dir: str = "logs"
  route_prefix: str = "/api"
  host: str = "0.0.0.0"
  port: int = 8000

  @property
  def product_updated_route(self) -> str:
    prefix = self.route_prefix.strip("/")
    path = "/integration/events/product-updated"
    return f"/{prefix}{path}" if prefix else path


def load_settings() -> Settings:
  """
  Build Settings from environment variables.
  Missing variables fall back to the model defaults, invalid ones raise pydantic ValidationError.
  """
  env_map = {
    "app_env": "APP_ENV",
    "log_dir": "LOG_DIR",
    "route_prefix": "ROUTE_PREFIX",
    "host": "HOST",
    "port": "PORT",
  }
  data = {field: os.environ[env] for field, env in env_map.items() if os.environ.get(env)}
  return Settings(**data)
