import json
import logging
import os
import re
from datetime import datetime
from typing import Iterable

SENSITIVE_PATTERNS = [
    r'(?i)(access[_-]?key|secret|password|token|signature)(["\']?\s*[:=]\s*["\']?)[A-Za-z0-9+/=_-]{8,}',
    r'(?i)(ACCESS-(?:KEY|SIGNATURE)["\']?\s*[:=]\s*["\']?)[A-Za-z0-9+/=_-]+',
]


def scrub_secrets(text: str, extra: Iterable[str] = ()) -> str:
    """Replace sensitive values with ***."""
    if not isinstance(text, str):
        text = str(text)
    env_secrets = [v for k, v in os.environ.items()
                   if any(x in k.upper() for x in ['KEY', 'SECRET', 'TOKEN', 'PASSWORD'])
                   and v and len(v) > 8]
    for secret in [*env_secrets, *extra]:
        if secret:
            text = text.replace(secret, '***')

    text = re.sub(SENSITIVE_PATTERNS[0], r'\1\2***', text)
    text = re.sub(SENSITIVE_PATTERNS[1], r'\1***', text)
    # HMAC-SHA256 hex signatures
    text = re.sub(r'\b[a-f0-9]{64}\b', '***', text)
    return text


class SensitiveDataFilter(logging.Filter):
    """Filter that scrubs sensitive data from log records.

    `extra` holds literal values to mask on top of the env and pattern rules;
    a client passes its own keys here for as long as it is open.
    """
    def __init__(self, extra: Iterable[str] = ()):
        super().__init__()
        self.extra = tuple(v for v in extra if v)

    def _scrub(self, text: str) -> str:
        return scrub_secrets(text, self.extra)

    def filter(self, record):
        if record.msg and isinstance(record.msg, str):
            record.msg = self._scrub(record.msg)
        if record.args:
            if isinstance(record.args, dict):
                record.args = {k: (self._scrub(v) if isinstance(v, str) else v) for k, v in record.args.items()}
            elif isinstance(record.args, tuple):
                record.args = tuple(self._scrub(arg) if isinstance(arg, str) else arg for arg in record.args)
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "component": record.name,
            "message": record.getMessage(),
        }
        if hasattr(record, "meta") and isinstance(record.meta, dict):
            log_entry["meta"] = record.meta

        return scrub_secrets(json.dumps(log_entry, separators=(",", ":")))


def setup_logger(name: str = "coincheck_client", log_dir: str = None, level: str = None):
    logger = logging.getLogger(name)
    logger.setLevel((level or os.environ.get("COINCHECK_LOG_LEVEL", "WARNING")).upper())

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    sensitive_filter = SensitiveDataFilter()

    # JSON File Handler (opt-in)
    log_dir = log_dir or os.environ.get("COINCHECK_LOG_DIR")
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        fh = logging.FileHandler(os.path.join(log_dir, "coincheck.jsonl"))
        fh.setFormatter(JsonFormatter())
        fh.addFilter(sensitive_filter)
        logger.addHandler(fh)

    # Console Handler (Human readable)
    ch = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    ch.setFormatter(formatter)
    ch.addFilter(sensitive_filter)
    logger.addHandler(ch)

    return logger


logger = setup_logger()
