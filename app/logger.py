# app/logger.py

import logging
from logging.handlers import RotatingFileHandler
import os
import sys
import json
from datetime import datetime, timezone

from app.config import Settings, load_settings


class JsonFormatter(logging.Formatter):
  """One JSON object per line; non-ASCII text (event payloads included) is escaped."""

  def format(self, record):
    log_record = {
      "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
      "level": record.levelname,
      "logger": record.name,
      "message": record.getMessage(),
      "file": record.pathname,
      "line": record.lineno,
      "function": record.funcName
    }

    if record.exc_info:
      log_record["exception"] = self.formatException(record.exc_info)

    return json.dumps(log_record, default=str, ensure_ascii=True)


json_formatter = JsonFormatter()


def _file_handler(settings: Settings) -> RotatingFileHandler:
  # testing -> test.log (everything), otherwise app.log (INFO and up)
  if settings.app_env == "testing":
    path, max_bytes, backups, level = "test.log", 1*1024*1024, 1, logging.DEBUG
  else:
    path, max_bytes, backups, level = "app.log", 5*1024*1024, 3, logging.INFO

  handler = RotatingFileHandler(os.path.join(settings.log_dir, path), maxBytes=max_bytes, backupCount=backups, encoding="utf-8")
  handler.setLevel(level)
  handler.setFormatter(json_formatter)
  return handler


def configure_logging():
  settings = load_settings()
  os.makedirs(settings.log_dir, exist_ok=True)

  root = logging.getLogger()
  root.setLevel(logging.INFO if settings.app_env == "production" else logging.DEBUG)

  if root.hasHandlers():
    root.handlers.clear()

  # stdout only carries errors
  console_handler = logging.StreamHandler(sys.stdout)
  console_handler.setFormatter(json_formatter)
  console_handler.setLevel(logging.ERROR)
  root.addHandler(console_handler)

  root.addHandler(_file_handler(settings))


def get_logger(name):
  """Named logger under the root configured by configure_logging()."""
  return logging.getLogger(name)
