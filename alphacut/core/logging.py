from __future__ import annotations

import logging
import re


class UploadRedactionFilter(logging.Filter):
    # Uploaded file names and local paths can carry user identity.
    _patterns = [
        re.compile(r"\b[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}\b", re.I),
        re.compile(r"/(?:home|Users)/[^/\s]+"),
        re.compile(r"[A-Z]:\\Users\\[^\\\s]+", re.I),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        for pattern in self._patterns:
            msg = pattern.sub("[REDACTED]", msg)
        record.msg = msg
        record.args = ()
        # Keep tracebacks out of default logs; diagnostics can be collected separately.
        if record.exc_info:
            record.exc_info = None
            record.exc_text = None
        return True


def get_logger(name: str = "alphacut") -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.INFO)
    handler = logging.StreamHandler()
    handler.addFilter(UploadRedactionFilter())
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
