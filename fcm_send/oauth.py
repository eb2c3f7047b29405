"""OAuth2 access token exchange for a service account."""
import asyncio
import logging

import google.auth.exceptions
import google.auth.transport.requests
import requests

from .config import MESSAGING_SCOPE
from .errors import AuthError

logger = logging.getLogger(__name__)


def _refresh(credential, request=None):
    if request is not None:
        credential.refresh(request)
        return credential.token

    with requests.Session() as session:
        credential.refresh(google.auth.transport.requests.Request(session))
    return credential.token


async def fetch_access_token(key, scopes=(MESSAGING_SCOPE,), request=None) -> str:
    """Sign a JWT assertion with the key and trade it for a bearer token.

    `request` is a google-auth transport callable; by default a requests
    session is opened for the exchange and closed right after. The refresh
    blocks, so it runs in a worker thread.
    """
    credential = key.scoped_credential(scopes)

    try:
        access_token = await asyncio.to_thread(_refresh, credential, request)
    except google.auth.exceptions.GoogleAuthError as exc:
        raise AuthError(f"Token exchange for {key.client_email} failed: {exc}") from exc

    logger.info("Access token obtained for %s", key.client_email)
    return access_token
