"""Command line entry point for retrieving sessions."""

import asyncio
import dataclasses
import json
from typing import Any, Optional

import click
import httpx
from dotenv import load_dotenv
from pydantic import ValidationError

from sessionkit.config.provider import (
    ConfigProvider,
    EnvConfigProvider,
    Environment,
    StaticConfigProvider,
)
from sessionkit.logging_config import configure_logging
from sessionkit.modules.auth import (
    CredentialSessionRequest,
    SessionIdSessionRequest,
    SessionRequest,
    SessionRetrievalError,
    SessionServiceFactory,
)
from sessionkit.modules.transport import HttpxCallbackTransport

load_dotenv()


@click.group()
@click.option("--endpoint", "endpoint", default=None, help="Base address of the session service.")
@click.option(
    "--environment",
    "environment",
    type=click.Choice([member.name.lower() for member in Environment]),
    default=None,
    help="Known deployment to target when no endpoint is given.",
)
@click.option("--log-level", "log_level", default=None, help="Logging level (DEBUG, INFO, ...).")
@click.pass_context
def main(ctx: click.Context, endpoint: Optional[str], environment: Optional[str], log_level: Optional[str]):
    """Retrieve sessions from the session service."""
    if not endpoint and environment:
        endpoint = Environment.from_name(environment).value

    try:
        api_config = EnvConfigProvider(endpoint=endpoint).get_session_api_config()
    except ValueError as e:
        raise click.ClickException(str(e))

    overrides = {}
    if log_level:
        overrides["log_level"] = log_level.upper()

    api_config = dataclasses.replace(api_config, **overrides)
    configure_logging(api_config.log_level)
    ctx.obj = StaticConfigProvider(api_config)


@main.command()
@click.option("--email", "email", required=True)
@click.option("--password", "password", prompt=True, hide_input=True)
@click.pass_obj
def login(config_provider: ConfigProvider, email: str, password: str):
    """Create or fetch a session with credentials."""
    _run(config_provider, _build_request(CredentialSessionRequest, email=email, password=password))


@main.command()
@click.argument("session_id")
@click.pass_obj
def fetch(config_provider: ConfigProvider, session_id: str):
    """Re-fetch an existing session by its identifier."""
    _run(config_provider, _build_request(SessionIdSessionRequest, session_id=session_id))


def _build_request(model, **fields) -> SessionRequest:
    try:
        return model(**fields)
    except ValidationError as e:
        raise click.UsageError(f"Invalid session request: {e.error_count()} field(s) rejected")


def _run(config_provider: ConfigProvider, session_request: SessionRequest) -> None:
    try:
        payload = asyncio.run(_retrieve(config_provider, session_request))
    except (SessionRetrievalError, httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
        raise click.ClickException(str(e))

    click.echo(_format_payload(payload))


async def _retrieve(config_provider: ConfigProvider, session_request: SessionRequest) -> Any:
    api_config = config_provider.get_session_api_config()
    async with HttpxCallbackTransport(timeout=api_config.timeout_seconds) as transport:
        service = SessionServiceFactory.build(config_provider, client=transport)
        return await service.retrieve_session(session_request)


def _format_payload(payload: Any) -> str:
    if isinstance(payload, (dict, list)):
        return json.dumps(payload, indent=2)
    return str(payload)


if __name__ == "__main__":
    main()
