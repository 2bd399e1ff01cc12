from typing import List, Dict, Any
import base64
import logging
import mimetypes
import random
import re
import time
from datetime import datetime
from pathlib import Path
from .root import storage_root

"""Storage helpers for saving, listing, resolving and deleting photos.

The photo directory is the only source of truth: a photo exists exactly as
long as its ``.png`` file does.
"""

logger = logging.getLogger(__name__)

DATA_URI_PREFIX = "data:image/png;base64,"
PHOTO_SUFFIX = ".png"
URL_PREFIX = "/fotos"
_NON_BASE64 = re.compile(r"[^A-Za-z0-9+/]")


def format_timestamp(dt: datetime) -> str:
    """Render a datetime the way an es-SV locale shows short date and time.

    e.g. ``19/10/2026, 08:32 p. m.``
    """
    meridiem = "a. m." if dt.hour < 12 else "p. m."
    hour = dt.hour % 12 or 12
    return f"{dt.day:02d}/{dt.month:02d}/{dt.year:04d}, {hour:02d}:{dt.minute:02d} {meridiem}"


def _photo_url(filename: str) -> str:
    return f"{URL_PREFIX}/{filename}"


def _check_filename(filename: str) -> str:
    # Only bare names inside the photo directory are addressable
    if (
        not filename
        or filename in {".", ".."}
        or "/" in filename
        or "\\" in filename
        or "\x00" in filename
    ):
        raise ValueError("invalid_filename")
    return filename


def _decode_image(data: str) -> bytes:
    """Strip the data-URI prefix and decode the base64 payload.

    Characters outside the base64 alphabet are dropped and ``=`` padding is
    restored. A payload left with one dangling character (length ``4n+1``)
    raises ``binascii.Error``.
    """
    if data.startswith(DATA_URI_PREFIX):
        data = data[len(DATA_URI_PREFIX):]
    data = _NON_BASE64.sub("", data)
    data += "=" * (-len(data) % 4)
    return base64.b64decode(data)


def new_filename() -> str:
    """Build ``foto_<unix ms>_<1000-9999>.png``.

    Uniqueness is probabilistic: two calls in the same millisecond with the
    same random draw return the same name.
    """
    timestamp_ms = int(time.time() * 1000)
    suffix = random.randint(1000, 9999)
    return f"foto_{timestamp_ms}_{suffix}{PHOTO_SUFFIX}"


def list_photos() -> List[Dict[str, Any]]:
    """List every ``.png`` in the photo directory, newest name first.

    Ordering is by filename, descending; with the ``foto_<ms>_`` naming that
    puts recent uploads first. Any filesystem error aborts the whole listing.
    """
    root = storage_root()
    items: List[Dict[str, Any]] = []
    for entry in root.iterdir():
        if not entry.name.endswith(PHOTO_SUFFIX):
            continue
        mtime = entry.stat().st_mtime
        items.append(
            {
                "filename": entry.name,
                "url": _photo_url(entry.name),
                "timestamp": format_timestamp(datetime.fromtimestamp(mtime)),
            }
        )
    items.sort(key=lambda item: item["filename"], reverse=True)
    return items


def save_photo(data: str) -> Dict[str, Any]:
    """Decode a (data-URI) base64 image and write it under a fresh name.

    The bytes are written verbatim; nothing checks that they are a PNG.
    """
    data_bytes = _decode_image(data)
    filename = new_filename()
    (storage_root() / filename).write_bytes(data_bytes)
    logger.info("Saved photo %s (%d bytes)", filename, len(data_bytes))
    return {
        "filename": filename,
        "url": _photo_url(filename),
        "timestamp": format_timestamp(datetime.now()),
    }


def photo_path(filename: str) -> Path:
    """Resolve a stored photo to its path on disk.

    Raises ``ValueError`` for names that are not plain file names and
    ``FileNotFoundError`` when no such file exists.
    """
    path = storage_root() / _check_filename(filename)
    if not path.is_file():
        raise FileNotFoundError(filename)
    return path


def media_type(path: Path) -> str:
    if path.suffix == PHOTO_SUFFIX:
        return "image/png"
    return mimetypes.guess_type(path.name)[0] or "application/octet-stream"


def delete_photo(filename: str) -> None:
    """Remove a photo file.

    Raises ``FileNotFoundError`` if there is nothing by that name.
    """
    path = storage_root() / _check_filename(filename)
    if not path.exists():
        raise FileNotFoundError(filename)
    path.unlink()
    logger.info("Deleted photo %s", filename)
