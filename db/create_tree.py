from db.nodes import save_tree
from db.session import SessionLocal, init_db
from models.node import example_tree


def run() -> int:
    init_db()
    session = SessionLocal()
    try:
        return save_tree(session, example_tree())
    finally:
        session.close()


if __name__ == "__main__":
    print(run())
