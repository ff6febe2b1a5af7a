import logging
from src.utils.logger import setup_logger

catalog_api_logger = setup_logger(
    "catalog_api",
    logging.DEBUG,
    log_file="catalog_api.log"
)
