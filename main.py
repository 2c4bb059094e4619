"""
Entry point to run the API server.
"""
import os

import uvicorn


if __name__ == "__main__":
    uvicorn.run("app.api:app", host="0.0.0.0", port=int(os.getenv("PORT", "5000")))
