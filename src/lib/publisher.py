"""
Pen definition upload

Posts a serialized pen definition to the paste host and returns the link
the host hands back.
"""

import httpx

from ..models import PenDefinition
from .log import LOG


class PenUploadError(RuntimeError):
    """Raised when the paste host accepts the upload but returns no link"""
    pass


async def pen_upload(client: httpx.AsyncClient, pen: PenDefinition, paste_url: str) -> str:
    """
    Upload a pen definition as the form field 'text'

    Args:
        client: HTTP client
        pen: Definition to upload
        paste_url: Paste host endpoint

    Returns:
        Link to the uploaded document

    Raises:
        httpx.HTTPError: If the request fails
        PenUploadError: If the reply carries no link
    """
    LOG(f"Uploading pen definition to {paste_url}", level=2)
    response = await client.post(paste_url, data={"text": pen.json_serialize()})
    response.raise_for_status()

    reply = response.json()
    LOG(f"Paste host reply: {reply}", level=3)

    link = reply.get("link") if isinstance(reply, dict) else None
    if not link:
        raise PenUploadError(f"Paste host at {paste_url} returned no link")
    return link
