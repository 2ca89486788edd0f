from typing import Literal
from sqlalchemy.exc import OperationalError
import time
import logging
from .database import structures, get_db
from ..utils.constants import SUBMIT_RETRIES, SUBMIT_DELAY

log = logging.getLogger(__name__)


def submit_record(
    table: Literal["detections"],
    retries: int = SUBMIT_RETRIES,
    delay: int = SUBMIT_DELAY,
    **kwargs
):
    for attempt in range(retries):
        try:
            record = structures[table](**kwargs)
            with get_db() as db:
                if db is None:
                    return
                db.add(record)
                db.commit()
                db.refresh(record)
            return
        except OperationalError:
            if attempt < retries - 1:
                log.error("Failed to submit record, retrying in %s s", delay)
                time.sleep(delay)
            else:
                raise
