"""FastAPI application for the decision tree runtime."""

import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from decision_tree.adapters.web.routes import tree_router
from decision_tree.config import CONFIG, __version__

BANNER = "Decision Tree Processing Backend API - Use POST /execute to process decision trees"


@asynccontextmanager
async def lifespan(_app: FastAPI):
    print(f"Decision tree server v{__version__} listening on port {CONFIG['port']}", file=sys.stderr)
    print("All action logs will appear below:\n", file=sys.stderr)
    yield


app = FastAPI(title="Decision Tree Runtime", version=__version__, lifespan=lifespan)
app.include_router(tree_router)


@app.get("/", response_class=PlainTextResponse)
async def root():
    return BANNER
