# filmorate/database/core/transaction.py
from contextlib import contextmanager
from sqlalchemy.orm import Session

@contextmanager
def transactional(db: Session):
    """
    Run a multi-statement write as one unit. Joins the caller's transaction
    when one is already open (request-scoped sessions), otherwise opens one.
    """
    if db.in_transaction():
        yield db
        return
    with db.begin():
        yield db
