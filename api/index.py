import sys
import os
from pathlib import Path

# Serverless entry: make the project root importable
current_dir = Path(__file__).resolve().parent
project_root = current_dir.parent
sys.path.insert(0, str(project_root))

os.environ.setdefault("LOG_LEVEL", "INFO")

from claude_cli_proxy.main import app

__all__ = ["app"]
