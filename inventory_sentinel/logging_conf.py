import logging
import os
import time
from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        # timestamp/level come through the format string as None
        if not log_record.get("timestamp"):
            log_record["timestamp"] = time.strftime('%Y-%m-%dT%H:%M:%SZ', time.gmtime())
        if not log_record.get("level"):
            log_record["level"] = record.levelname
        log_record.setdefault("service", getattr(record, "service", record.name.split(".")[0]))
        entity = getattr(record, "entity", None)
        if entity:
            log_record["entity"] = entity


def configure_logging(service_name: str = "inventory_sentinel", level: str = None) -> logging.Logger:
    """
    Attach a JSON stream handler to the service logger.
    Module loggers are children of it (``inventory_sentinel.<module>``), so they inherit the handler.
    """
    logger = logging.getLogger(service_name)
    if not any(isinstance(h.formatter, CustomJsonFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(CustomJsonFormatter("%(timestamp)s %(level)s %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level or os.getenv("LOG_LEVEL", "INFO"))
    logger.propagate = False
    return logger
