"""Run the numstats service with uvicorn: ``python -m numstats``."""
import uvicorn

from numstats.config import Settings
from numstats.main import create_app


def main() -> None:
    settings = Settings.from_env()
    # log_config=None keeps the handlers installed by setup_logging
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
