# backend.py - docseek Search Server
# Serves TF-IDF search over one loaded index file.

import logging
import time

from fastapi import FastAPI, HTTPException, Query

import config
from errors import FormatError, StorageError
from search import SearchSession

log = logging.getLogger("docseek-server")

MAX_LIMIT = 100


def create_app(index_path: str) -> FastAPI:
    """Build the app around the index at index_path.

    Loading errors at startup propagate to the caller; once serving, a broken
    index file only fails /reload and the previous index stays in use.
    """
    app = FastAPI(title="docseek", version="1.0")
    app.state.session = SearchSession.from_file(index_path)
    app.state.index_path = index_path

    # ─── ENDPOINTS ────────────────────────────────────────────────────────────
    @app.get("/search")
    def search_ep(q: str = Query(...),
                  limit: int = Query(config.RESULT_LIMIT, ge=1, le=MAX_LIMIT)):
        query = q.strip()
        if not query:
            raise HTTPException(400, "Empty query")
        t0 = time.time()
        results = app.state.session.search(query, limit)
        return {
            "query":   query,
            "results": results,
            "elapsed": round(time.time() - t0, 4),
        }

    @app.get("/stats")
    def stats_ep():
        return app.state.session.stats()

    @app.post("/reload")
    def reload_ep():
        try:
            session = SearchSession.from_file(app.state.index_path)
        except (StorageError, FormatError) as e:
            log.error(f"Reload failed: {e}")
            raise HTTPException(500, f"Reload failed: {e}") from e
        app.state.session = session
        return {"ok": True, "documents": len(session.index)}

    return app


def serve(index_path: str, host: str = config.HOST, port: int = config.PORT):
    import uvicorn

    app = create_app(index_path)
    log.info(f"Serving {index_path} on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level=config.LOG_LEVEL.lower())
