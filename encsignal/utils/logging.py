import os
import logging
from logging import Handler, LogRecord, Formatter

# third-party loggers that flood DEBUG output with per-request/per-font noise
QUIET_LOGGERS = ("urllib3", "matplotlib", "biothings.client")


def config_logging(logfolder: str, level: str = "NOTSET") -> "PerFileHandler":
    """Log to console and, per logger name, to separate files inside logfolder"""
    os.makedirs(logfolder, exist_ok=True)
    logging.basicConfig(level=level, format="%(levelname)s: %(name)s: %(message)s")
    logger = logging.getLogger()

    handler = PerFileHandler(logfolder)
    handler.setLevel(level)
    handler.setFormatter(Formatter("%(asctime)s: %(levelname)s: %(message)s"))
    logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler


class PerFileHandler(Handler):
    def __init__(self, logfolder, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.logfolder = logfolder
        self.__files = {}

    def emit(self, record: LogRecord) -> None:
        file = os.path.join(self.logfolder, f"{record.name}.log")
        if file not in self.__files:
            self.__files[file] = open(file, 'a')
        print(self.format(record), file=self.__files[file], flush=True)

    def close(self) -> None:
        for f in self.__files.values():
            f.close()
        self.__files.clear()
        super().close()
