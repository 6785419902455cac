"""
Byte uploads: https://developers.google.com/photos/library/guides/upload-media

Both flows return an upload token, valid for one later
``mediaItems:batchCreate`` call.
"""

import logging
import mimetypes
from pathlib import Path

from gphotos.transport import API_ROOT, Transport

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 8 * 1024 * 1024


class UploadsClient:
    """Requests against the ``uploads`` endpoint."""

    base_url = f"{API_ROOT}/uploads"

    def __init__(self, transport: Transport):
        self.transport = transport

    def upload_media(self, file_path: str | Path, filename: str | None = None) -> str:
        """
        Upload a file in a single raw request.

        Args:
            file_path: Local file to stream as the request body
            filename: Name reported to the server (defaults to the file's name)

        Returns:
            The upload token (the response body as text)

        Raises:
            FileNotFoundError: If the file cannot be opened
            ApiError: If the upload is rejected
        """
        path = Path(file_path)
        filename = filename or path.name
        headers = {
            "Content-Type": "application/octet-stream",
            "X-Goog-Upload-File-Name": filename,
            "X-Goog-Upload-Protocol": "raw",
        }
        with open(path, "rb") as f:
            response = self.transport.request("POST", self.base_url, data=f, headers=headers)
        logger.debug(f"Uploaded {filename} ({path.stat().st_size} bytes)")
        return response.text

    def resumable_upload(
        self,
        file_path: str | Path,
        filename: str | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> str:
        """
        Upload a file through a resumable session, chunk by chunk.

        The session is started with the file's size and MIME type, then each
        chunk is posted with its byte offset; the last chunk finalizes the
        session and its response body is the upload token.
        """
        path = Path(file_path)
        filename = filename or path.name
        size = path.stat().st_size
        content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"

        start = self.transport.request(
            "POST",
            self.base_url,
            headers={
                "Content-Length": "0",
                "X-Goog-Upload-Command": "start",
                "X-Goog-Upload-Content-Type": content_type,
                "X-Goog-Upload-File-Name": filename,
                "X-Goog-Upload-Protocol": "resumable",
                "X-Goog-Upload-Raw-Size": str(size),
            },
        )
        session_url = start.headers.get("X-Goog-Upload-URL")
        if not session_url:
            raise ValueError("Resumable upload start response has no X-Goog-Upload-URL header")

        granularity = int(start.headers.get("X-Goog-Upload-Chunk-Granularity") or 0)
        if granularity > 0:
            chunk_size = max(granularity, chunk_size - chunk_size % granularity)

        offset = 0
        with open(path, "rb") as f:
            while True:
                chunk = f.read(chunk_size)
                last = offset + len(chunk) >= size
                if not chunk and not last:
                    raise ValueError(f"{path} shrank to {offset} bytes during upload (expected {size})")
                response = self.transport.request(
                    "POST",
                    session_url,
                    data=chunk,
                    headers={
                        "Content-Length": str(len(chunk)),
                        "X-Goog-Upload-Command": "upload, finalize" if last else "upload",
                        "X-Goog-Upload-Offset": str(offset),
                    },
                )
                offset += len(chunk)
                if last:
                    break
                logger.debug(f"{filename}: {offset}/{size} bytes sent")

        return response.text
