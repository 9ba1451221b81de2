# /run.py

import subprocess
import os
import sys

from app.config import load_settings

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def run_fastapi():
  settings = load_settings()
  command = [sys.executable, "-m", "uvicorn", "app.main:app", "--host", settings.host, "--port", str(settings.port)]
  if settings.app_env == "development":
    command.append("--reload")
  subprocess.run(command, cwd=BASE_DIR)

if __name__ == "__main__":
  run_fastapi()
