import logging
import os

from dotenv import load_dotenv, find_dotenv

load_dotenv(find_dotenv())


class Config:
    BASE_URL = os.getenv("HTTPKIT_BASE_URL", "http://127.0.0.1:8000")
    ENDPOINT = os.getenv("HTTPKIT_ENDPOINT", "/assessment-endpoint.php")

    # Submission sent by the driver
    SUBMISSION_NAME = os.getenv("SUBMISSION_NAME", "")
    SUBMISSION_EMAIL = os.getenv("SUBMISSION_EMAIL", "")
    SUBMISSION_URL = os.getenv("SUBMISSION_URL", "")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def setup_logging():
    logging.basicConfig(
        level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
