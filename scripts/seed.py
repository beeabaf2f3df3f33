from app.core.config import settings
from app.core.logging import setup_logging
from app.db.session import engine, Session, init_db

from app.db.seed import seed_all

def run_seed(seed_path: str = "app/db/seed_data.yaml"):
    setup_logging(settings.LOG_LEVEL)
    init_db()
    with Session(engine) as session:
        seed_all(session=session, seed_path=seed_path)

if __name__ == "__main__":
    run_seed()
