#!/usr/bin/env python
"""Start the back office with uvicorn."""
import os

import uvicorn

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8000))

    print(f"Starting back office on port {port}")

    uvicorn.run(
        "backoffice.main:app",
        host=os.environ.get("HOST", "0.0.0.0"),
        port=port,
        reload=os.environ.get("ENVIRONMENT", "development") == "development",
        log_level="info"
    )
