"""
Command line entry points.

    fcm-send [--override] <deviceToken>
    fcm-send-env [--override] <staging|production> <deviceToken>

The first form always uses the production profile. --override may appear
anywhere and adds the iOS badge and Android click action blocks. Any other
extra argument is rejected.
"""
import asyncio
import logging
import sys

from .config import ENVIRONMENTS, PRODUCTION, settings_for
from .credentials import load_service_account
from .delivery import send_message
from .errors import ConfigError, FcmSendError
from .message import build_message, build_override_message
from .oauth import fetch_access_token

logger = logging.getLogger(__name__)

OVERRIDE_FLAG = "--override"


def setup_logging(level=logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def parse_args(argv, with_env=False):
    """Return (env, device_token, override) or raise ConfigError."""
    args = [a for a in argv if a != OVERRIDE_FLAG]
    override = len(args) != len(argv)

    env = PRODUCTION
    if with_env:
        env = args.pop(0) if args else None
        if env not in ENVIRONMENTS:
            raise ConfigError(f"env should be input as one of: {', '.join(ENVIRONMENTS)}")

    device_token = args[0] if args else None
    if not device_token:
        raise ConfigError("deviceToken should be input")
    if len(args) > 1:
        raise ConfigError(f"unexpected arguments: {' '.join(args[1:])}")
    return env, device_token, override


async def run(settings, device_token, builder=build_message, transport=None, token_request=None):
    """Load the key, fetch a token, then send one message. Strictly in that order."""
    key = load_service_account(settings.credential_path)
    access_token = await fetch_access_token(key, (settings.scope,), request=token_request)
    message = builder(device_token)
    return await send_message(settings, access_token, message, transport=transport)


def _main(argv, with_env, transport=None, token_request=None):
    try:
        env, device_token, override = parse_args(argv, with_env=with_env)
    except ConfigError as exc:
        print(exc, file=sys.stderr)
        return 1

    setup_logging()
    settings = settings_for(env)
    builder = build_override_message if override else build_message
    logger.info("Sending to %s (%s) using %s", settings.project_id, env, settings.credential_path)

    try:
        asyncio.run(run(settings, device_token, builder, transport=transport, token_request=token_request))
    except FcmSendError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


def main(argv=None, transport=None, token_request=None):
    if argv is None:
        argv = sys.argv[1:]
    return _main(argv, with_env=False, transport=transport, token_request=token_request)


def main_env(argv=None, transport=None, token_request=None):
    if argv is None:
        argv = sys.argv[1:]
    return _main(argv, with_env=True, transport=transport, token_request=token_request)
