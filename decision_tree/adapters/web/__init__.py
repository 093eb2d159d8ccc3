"""HTTP adapter (FastAPI)."""

from decision_tree.adapters.web.routes import tree_router
from decision_tree.adapters.web.server import app

__all__ = ["app", "tree_router"]
