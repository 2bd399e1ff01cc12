import os
from pydantic import BaseModel
from typing import List

class Settings(BaseModel):
    """for reading environment-driven configuration.

    Values have sensible defaults for running the service from a checkout.
    """
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    fotos_dir: str = os.getenv("FOTOS_DIR", "fotos")
    public_dir: str = os.getenv("PUBLIC_DIR", "public")
    # 50 MB, same ceiling the JSON body parser had
    max_body_bytes: int = int(os.getenv("MAX_BODY_BYTES", str(50 * 1024 * 1024)))
    cors_origins: List[str] = [
        o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()
    ]
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
