#!/usr/bin/env python3
"""Decision tree runtime server.

POST /execute with a JSON action tree; every action's side effect is
printed to stdout as it runs.
"""

import uvicorn

from decision_tree.adapters.web.server import app
from decision_tree.config import CONFIG

# ============================================
# Main entry point
# ============================================
if __name__ == "__main__":
    uvicorn.run(app, host=CONFIG["host"], port=CONFIG["port"], log_level="info")
