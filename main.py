import sys
import logging
import argparse

from core.config_loader import load_config
from database.database import create_db_engine, create_session_factory
from database.init_db import init_db
from database.seed import seed_questions
from database.uow import repository_uow

logger = logging.getLogger(__name__)


def run_init_db(config):
    engine = create_db_engine(config.database.url)
    init_db(engine)


def run_seed(config):
    engine = create_db_engine(config.database.url)
    init_db(engine)
    with repository_uow(create_session_factory(engine)) as repo:
        inserted = seed_questions(repo)
    logger.info(f"Seed finished, {inserted} questions inserted")


def run_serve(config):
    from web.backend.app import main as serve
    serve()


COMMANDS = {
    'serve': run_serve,
    'init-db': run_init_db,
    'seed': run_seed,
}


def main(argv=None):
    parser = argparse.ArgumentParser(description="tempmatch")
    parser.add_argument('command', choices=sorted(COMMANDS),
                        help='serve: run the API, init-db: create tables, seed: insert default questions')
    parser.add_argument('--config', type=str, default='config.yaml',
                        help='Path to the YAML configuration file')
    args = parser.parse_args(argv)

    config = load_config(args.config)

    logging.basicConfig(
        level=getattr(logging, config.logging.level.upper(), logging.INFO),
        format=config.logging.format
    )

    try:
        COMMANDS[args.command](config)
    except Exception:
        logger.exception(f"Command failed: {args.command}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
