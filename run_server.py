#!/usr/bin/env python
"""Script to run the shared agenda API server."""
import uvicorn

from agenda.config import PORT

if __name__ == "__main__":
    uvicorn.run(
        "agenda.main:app",
        host="0.0.0.0",
        port=PORT,
    )
