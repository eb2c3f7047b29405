"""
Environment profiles.

Each run builds one Settings object up front and hands it to the loader and the
delivery client. Nothing here is mutated afterwards.
"""
from pydantic import BaseModel, ConfigDict

from .errors import ConfigError

HOST = "fcm.googleapis.com"
MESSAGING_SCOPE = "https://www.googleapis.com/auth/firebase.messaging"

PRODUCTION = "production"
STAGING = "staging"
ENVIRONMENTS = (STAGING, PRODUCTION)

_PROFILES = {
    PRODUCTION: {
        "project_id": "miso-mobile",
        "credential_path": "./miso-mobile-firebase-adminsdk.json",
    },
    STAGING: {
        "project_id": "miso-mobile-staging",
        "credential_path": "./miso-mobile-staging-firebase-adminsdk.json",
    },
}


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    env: str = PRODUCTION
    host: str = HOST
    project_id: str
    credential_path: str
    scope: str = MESSAGING_SCOPE

    @property
    def path(self) -> str:
        return f"/v1/projects/{self.project_id}/messages:send"

    @property
    def url(self) -> str:
        return f"https://{self.host}{self.path}"


def settings_for(env: str = PRODUCTION) -> Settings:
    if env not in _PROFILES:
        raise ConfigError(f"env should be one of: {', '.join(ENVIRONMENTS)} (got {env!r})")
    return Settings(env=env, **_PROFILES[env])
