from pathlib import Path
from ..core.config import settings

def storage_root() -> Path:
    """Resolve the configured photo directory to an absolute path.
    """
    return Path(settings.fotos_dir).resolve()

def ensure_storage_root() -> Path:
    """Create the photo directory if it does not exist yet and return it."""
    root = storage_root()
    root.mkdir(parents=True, exist_ok=True)
    return root
