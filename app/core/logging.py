import logging
import sys
from app.core.config import settings

# Packages of this service; they log at settings.log_level
SERVICE_PACKAGES = ("app", "calibration", "store", "snapshots", "validation")

def configure_logging() -> None:
    """
    Configure console logging for the calibration service.

    Service packages log at `log_level`; everything else (uvicorn,
    fastapi, httpx) stays at `library_log_level`.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.library_log_level)
    
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z"
    ))
    root_logger.addHandler(handler)
    
    for package in SERVICE_PACKAGES:
        logging.getLogger(package).setLevel(settings.log_level)
    
    # Startup banner and bound address stay visible
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
