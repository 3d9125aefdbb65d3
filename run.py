# run.py

import uvicorn
from ua_classifier.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "ua_classifier.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        workers=1,  # Single worker - cache lives in process memory
    )
