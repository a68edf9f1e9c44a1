"""Run the Echowell server.

Usage:
    python -m echowell.serve
"""
import logging
import sys

import uvicorn

from echowell.core import config
from echowell.database import Database
from echowell.main import create_app


def main() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    try:
        config.validate_runtime_config()
    except RuntimeError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(1)

    database = Database(config.DATABASE_URL, echo=config.DATABASE_ECHO)
    app = create_app(database)
    logging.getLogger(__name__).info('Starting server on http://%s:%s', config.HOST, config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_config=None, lifespan='on')


if __name__ == "__main__":
    main()
