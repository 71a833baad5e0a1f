import logging
import sys

def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # requests/urllib3 log every connection
    for name in ("urllib3", "requests"):
        logging.getLogger(name).setLevel(logging.WARNING)
