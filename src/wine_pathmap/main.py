import logging
import sys

from fastapi import FastAPI

from wine_pathmap.routers import api_router


def configure_logging(level: int | str = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


app = FastAPI(
    title="Wine Path Map",
    version="0.1.0",
)

app.include_router(api_router)


@app.get("/")
async def root() -> dict[str, str]:
    return {"status": "ok"}
