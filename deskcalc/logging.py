import logging
from logging import getLogger

from deskcalc.utils import has_env

log = getLogger("deskcalc")
logging.basicConfig(format="[deskcalc] %(message)s")


if has_env("DEBUG"):
    log.setLevel(logging.DEBUG)
elif has_env("DESKCALC_LOG", "debug"):
    log.setLevel(logging.DEBUG)
elif has_env("DESKCALC_LOG", "info"):
    log.setLevel(logging.INFO)
elif has_env("DESKCALC_LOG", "warning"):
    log.setLevel(logging.WARNING)
elif has_env("DESKCALC_LOG", "error"):
    log.setLevel(logging.ERROR)
else:
    log.setLevel(logging.CRITICAL)
