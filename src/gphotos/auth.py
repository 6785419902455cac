# OAuth2 helpers handing back an authenticated session
import logging
import pathlib
from collections.abc import Sequence

from google.auth.transport.requests import AuthorizedSession, Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow, InstalledAppFlow

logger = logging.getLogger(__name__)


class Scope:
    """Photos Library OAuth scopes."""

    # List and read the whole library; share info needs SHARING as well
    READONLY = "https://www.googleapis.com/auth/photoslibrary.readonly"
    # Upload, create items and albums, add enrichments
    APPENDONLY = "https://www.googleapis.com/auth/photoslibrary.appendonly"
    READONLY_APPCREATEDDATA = "https://www.googleapis.com/auth/photoslibrary.readonly.appcreateddata"
    EDIT_APPCREATEDDATA = "https://www.googleapis.com/auth/photoslibrary.edit.appcreateddata"
    # READONLY + APPENDONLY, without sharing
    READ_AND_APPEND = "https://www.googleapis.com/auth/photoslibrary"
    SHARING = "https://www.googleapis.com/auth/photoslibrary.sharing"


SCOPES = [Scope.READ_AND_APPEND, Scope.SHARING]


def get_creds(
    token_path: str = "token.json",
    client_secret_path: str = "client_secret.json",
    scopes: Sequence[str] = SCOPES,
) -> Credentials:
    """
    Load, refresh or obtain user credentials.

    A cached token is refreshed when expired; otherwise the installed-app
    flow runs a local server for the consent screen. The resulting token is
    written back to ``token_path``.
    """
    scopes = list(scopes)
    creds: Credentials | None = None
    if pathlib.Path(token_path).exists():
        creds = Credentials.from_authorized_user_file(token_path, scopes)
    if not creds or not creds.valid:
        if creds and creds.expired and creds.refresh_token:
            creds.refresh(Request())
        else:
            if not pathlib.Path(client_secret_path).exists():
                raise FileNotFoundError(f"Missing client secret file at {client_secret_path}")
            flow = InstalledAppFlow.from_client_secrets_file(client_secret_path, scopes)
            creds = flow.run_local_server(port=0)
        try:
            with open(token_path, "w") as f:
                f.write(creds.to_json())
        except OSError as e:
            logger.debug(f"Could not write token file (read-only): {e}")
    return creds


def authorization_url(
    client_secret_path: str,
    scopes: Sequence[str] = SCOPES,
    redirect_uri: str = "urn:ietf:wg:oauth:2.0:oob",
) -> tuple[Flow, str]:
    """
    Start a manual consent flow.

    Returns:
        Tuple of (flow, url). Send the user to ``url`` and pass the code they
        get back to exchange_code together with ``flow``.
    """
    flow = Flow.from_client_secrets_file(client_secret_path, scopes=list(scopes), redirect_uri=redirect_uri)
    url, _ = flow.authorization_url(access_type="offline", prompt="consent")
    return flow, url


def exchange_code(flow: Flow, code: str) -> Credentials:
    """Trade an authorization code for credentials."""
    flow.fetch_token(code=code)
    return flow.credentials


def authorized_session(creds: Credentials) -> AuthorizedSession:
    """A requests session that attaches (and refreshes) the bearer token."""
    return AuthorizedSession(creds)
