import os
import json
import traceback
from datetime import datetime

DEFAULT_LOG_DIR = "logs"

SEPARATOR = "\n------------------------------------------------------------\n"


def get_log_dir() -> str:
    # Read on every call so a .env or test override takes effect without re-import
    log_dir = os.path.abspath(os.getenv("ROME_TOUR_LOG_DIR", DEFAULT_LOG_DIR))
    if not os.path.exists(log_dir):
        os.makedirs(log_dir, exist_ok=True)
    return log_dir


def write_log(category: str, content):
    try:
        timestamp = datetime.now().isoformat()
        log_file_path = os.path.join(get_log_dir(), f"{category}.log")

        log_string = f"[{timestamp}]\n"
        if isinstance(content, (dict, list)):
            log_string += json.dumps(content, indent=2, default=str)
        elif isinstance(content, BaseException):
            log_string += "".join(traceback.format_exception(None, content, content.__traceback__))
        else:
            log_string += str(content)

        log_string += SEPARATOR

        with open(log_file_path, "a", encoding="utf-8") as f:
            f.write(log_string)
    except Exception as e:
        print(f"Failed to write to log {category}: {e}")
