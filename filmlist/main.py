"""Run the watch-list API under uvicorn (host/port from FILMLIST_API_* env)."""
import logging
import uvicorn

from filmlist.config import API_HOST, API_PORT, LOG_LEVEL, ensure_data_dir

if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s: %(message)s")
    ensure_data_dir()
    uvicorn.run(
        "filmlist.api.app:app",
        host=API_HOST,
        port=API_PORT,
        reload=True,
    )
