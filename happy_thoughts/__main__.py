"""Run the API with uvicorn: ``python -m happy_thoughts``"""

# External package imports
import uvicorn

# Local application imports
from .core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "happy_thoughts.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
