import logging
import sys
from logging.handlers import RotatingFileHandler
import os
import json
from datetime import datetime, timezone


class JsonFormatter(logging.Formatter):
    """JSON formatter for production log aggregation."""

    EXTRA_KEYS = ("request_id", "empresa_origem_id", "empresa_destino_id", "etapa", "user_id")

    def format(self, record):
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in self.EXTRA_KEYS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(name="migracao_base", log_file="migracao.log", level=None):
    """
    Configures the shared logger: rotating file under logs/ plus stdout.
    LOG_LEVEL and LOG_JSON are read from the environment.
    """
    if level is None:
        level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)

    os.makedirs("logs", exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    use_json = os.getenv("LOG_JSON", "0") == "1"
    formatter = JsonFormatter() if use_json else logging.Formatter(
        '[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    file_handler = RotatingFileHandler(
        os.path.join("logs", log_file), maxBytes=5*1024*1024, backupCount=5, encoding='utf-8'
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


logger = setup_logging()
