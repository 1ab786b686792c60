# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Click command generation from endpoint classes via introspection.

Each endpoint becomes a command group named after the endpoint (with
dashes), and each public async method becomes a command. String
parameters map to ``--option-name`` options; pydantic model parameters
take a JSON document through the same kind of option.

Commands do not use the local endpoint's service. Every command also
takes ``--url`` and ``--token`` (or ``APPO_URL`` / ``APPO_TOKEN``) and
runs the endpoint method against the service returned by
``service_factory(url, token)``, normally an HTTP-backed service talking
to a running appo-server. Identifier checks still run locally first.

Example:
    ::

        @click.group()
        def cli():
            pass

        register_endpoint(cli, endpoint, HttpAppInstanceInfoService.connect)

        # appo-server app-instance-infos get --tenant-id ... --app-instance-id ... --token ...
"""

from __future__ import annotations

import asyncio
import inspect
import json
from collections.abc import Callable
from typing import Any

import click
from pydantic import BaseModel, ValidationError

from ..errors import AppoError
from .endpoint_base import BaseEndpoint

ServiceFactory = Callable[[str, str | None], Any]


def _option_name(param_name: str) -> str:
    return "--" + param_name.replace("_", "-")


def _to_jsonable(value: Any) -> Any:
    """Convert endpoint results to JSON-compatible values."""
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True)
    if isinstance(value, list):
        return [_to_jsonable(v) for v in value]
    return value


def _is_model(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, BaseModel)


def _connection_options(default_url: str) -> list[click.Parameter]:
    return [
        click.Option(
            ["--url", "url"],
            default=default_url,
            envvar="APPO_URL",
            show_default=True,
            help="appo-server base URL or registered connection name",
        ),
        click.Option(
            ["--token", "token"],
            envvar="APPO_TOKEN",
            help="Access token sent in the access_token header",
        ),
    ]


def _make_command(
    endpoint: BaseEndpoint,
    method_name: str,
    method: Callable,
    service_factory: ServiceFactory,
) -> click.Command:
    """Build a click command that runs one endpoint method remotely."""
    params: list[click.Parameter] = []
    models: dict[str, type[BaseModel]] = {}

    for param_name, annotation, default in endpoint.get_param_types(method_name):
        required = default is inspect.Parameter.empty
        if _is_model(annotation):
            models[param_name] = annotation
            help_text = f"{annotation.__name__} as JSON"
        else:
            help_text = param_name.replace("_", " ")
        option_kwargs: dict[str, Any] = {"type": str, "required": required, "help": help_text}
        if not required:
            option_kwargs["default"] = default
        params.append(click.Option([_option_name(param_name), param_name], **option_kwargs))

    params.extend(_connection_options(f"http://localhost:{endpoint.config.port}"))

    def callback(url: str, token: str | None, **kwargs: Any) -> None:
        for param_name, model in models.items():
            raw = kwargs.get(param_name)
            if raw is None:
                continue
            try:
                kwargs[param_name] = model.model_validate_json(raw)
            except ValidationError as e:
                raise click.BadParameter(str(e), param_hint=_option_name(param_name)) from e
        target = type(endpoint)(service_factory(url, token), endpoint.config)
        try:
            result = asyncio.run(getattr(target, method_name)(**kwargs))
        except AppoError as e:
            raise click.ClickException(e.message) from e
        click.echo(json.dumps(_to_jsonable(result), indent=2))

    doc = inspect.getdoc(method) or f"{method_name} operation"
    return click.Command(
        name=method_name.replace("_", "-"),
        params=params,
        callback=callback,
        help=doc,
        short_help=doc.split("\n")[0],
    )


def register_endpoint(
    group: click.Group, endpoint: BaseEndpoint, service_factory: ServiceFactory
) -> click.Group:
    """Register all methods of an endpoint as click commands.

    Args:
        group: Parent click group.
        endpoint: Endpoint instance whose methods become commands.
        service_factory: Callable ``(url, token) -> service`` used by each
            command invocation.

    Returns:
        The endpoint's command group.
    """
    name = endpoint.name.replace("_", "-")
    endpoint_group = click.Group(name=name, help=f"Manage {endpoint.name.replace('_', ' ')}.")
    for method_name, method in endpoint.get_methods():
        endpoint_group.add_command(_make_command(endpoint, method_name, method, service_factory))
    group.add_command(endpoint_group)
    return endpoint_group


__all__ = ["register_endpoint"]
