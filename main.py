# main.py - MindFlow API entry point
# Start: uvicorn main:app --host 0.0.0.0 --port $PORT
# Env: DATABASE_URL, JWT_SECRET, ALLOWED_ORIGINS, AI_GATEWAY_API_KEY
import uvicorn

from mindflow.core.config import settings
from mindflow.main import app

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
