"""
Web 진입점

실행 방법:
    python -m web

설정은 config/settings.yaml 에서 로드 (lifespan).
"""

import uvicorn

from core.constants import Defaults

if __name__ == "__main__":
    uvicorn.run(
        "web.app:app",
        host=Defaults.WEB_HOST,
        port=Defaults.WEB_PORT,
        reload=False,
        log_level=Defaults.LOG_LEVEL.lower(),
    )
