import os
import sys
import logging

from ytnotes.config import config

logging_str = "[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s"
logging_dir = str(config.LOG_DIR)
logging_path = os.path.join(logging_dir, "ytnotes.log")
if not os.path.exists(logging_dir):
    os.makedirs(logging_dir)

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format=logging_str,
    handlers=[
        logging.FileHandler(logging_path, encoding="utf-8"),
        logging.StreamHandler(sys.stdout)
    ]
)

logging = logging.getLogger('ytnotes')
