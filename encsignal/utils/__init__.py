from .logging import config_logging, PerFileHandler
from .aio import batched_gather, inexecutor
