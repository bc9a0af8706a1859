"""
Content-addressed blob store on the local filesystem.

Receipt images are written under `<root>/<aa>/<sha256><ext>` where `aa` is
the first two hex digits of the digest. Uploading identical bytes twice
returns the same reference.
"""

from __future__ import annotations

import hashlib
import logging
import mimetypes
from pathlib import Path

from pocketledger.errors import StoreError

logger = logging.getLogger(__name__)


class FileBlobStore:
    """Stores image blobs in a directory and returns file:// URIs."""

    def __init__(self, root: Path | str):
        self.root = Path(root)

    def upload(self, data: bytes, content_type: str) -> str:
        """Write the blob and return its file URI.

        Raises:
            StoreError: for empty payloads, non-image content types, or write errors
        """
        if not data:
            raise StoreError("Refusing to store an empty blob")
        if not content_type.startswith("image/"):
            raise StoreError(f"Unsupported content type: {content_type}")

        digest = hashlib.sha256(data).hexdigest()
        ext = mimetypes.guess_extension(content_type) or ""
        path = self.root / digest[:2] / f"{digest}{ext}"

        try:
            if not path.exists():
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_bytes(data)
        except OSError as e:
            raise StoreError(f"Failed to write blob {digest[:8]}: {e}") from e

        logger.debug("Stored blob %s (%d bytes)", digest[:8], len(data))
        return path.resolve().as_uri()


__all__ = ["FileBlobStore"]
