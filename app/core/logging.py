"""Structured logging setup."""
import logging, sys, json

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    def format(self, record):
        base = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        for k, v in record.__dict__.items():
            if k.startswith("_") or k in _RESERVED_ATTRS:
                continue
            base[k] = v
        return json.dumps(base, default=str)


def build_formatter(log_format: str = "json", text_format: str | None = None) -> logging.Formatter:
    """JSON formatter for ``json``, a %-style text formatter for anything else."""
    if log_format == "json":
        return JsonFormatter()
    return logging.Formatter(text_format or "%(asctime)s %(levelname)s %(name)s %(message)s")


def configure_logging(level: str = "INFO", log_format: str = "json", text_format: str | None = None) -> None:
    root = logging.getLogger()
    root.setLevel(level)
    if root.handlers:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter(log_format, text_format))
    root.addHandler(handler)
