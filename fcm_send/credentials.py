"""Service-account key loading."""
import json
import logging

from firebase_admin import credentials

from .errors import CredentialNotFoundError, CredentialParseError

logger = logging.getLogger(__name__)


class ServiceAccountKey:
    """A parsed service-account JSON file.

    The firebase_admin Certificate does the field and key validation; the raw
    JSON is kept alongside it so the key material stays inspectable.
    """

    def __init__(self, path, info, certificate):
        self._path = str(path)
        self._info = dict(info)
        self._certificate = certificate

    @property
    def path(self):
        return self._path

    @property
    def client_email(self):
        return self._certificate.service_account_email

    @property
    def private_key(self):
        return self._info["private_key"]

    @property
    def project_id(self):
        return self._certificate.project_id

    def scoped_credential(self, scopes):
        """Return a google-auth credential limited to the given scopes."""
        return self._certificate.get_credential().with_scopes(list(scopes))

    def __repr__(self):
        return f"ServiceAccountKey(path={self._path!r}, client_email={self.client_email!r})"


def load_service_account(path) -> ServiceAccountKey:
    logger.info("Loading service account from %s", path)
    try:
        with open(path) as json_file:
            info = json.load(json_file)
    except OSError as exc:
        raise CredentialNotFoundError(f"Cannot read service account file {path}: {exc}") from exc
    except ValueError as exc:
        raise CredentialParseError(f"Service account file {path} is not valid JSON: {exc}") from exc

    if not isinstance(info, dict):
        raise CredentialParseError(f"Service account file {path} does not hold a JSON object")

    try:
        certificate = credentials.Certificate(info)
    except (ValueError, KeyError) as exc:
        raise CredentialParseError(f"Invalid service account file {path}: {exc}") from exc

    return ServiceAccountKey(path, info, certificate)
