# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Base class for endpoint introspection and parameter validation.

This module provides the foundation shared by the API and CLI layers:
endpoint classes expose public async methods, and the CLI builds its
commands from their signatures.

Components:
    BaseEndpoint: Base class with introspection and pattern checks.

Example:
    Define an endpoint::

        from appo_server.interface.endpoint_base import BaseEndpoint

        class ItemEndpoint(BaseEndpoint):
            name = "items"

            async def get(self, tenant_id: str, item_id: str) -> dict:
                \"\"\"Retrieve one item.\"\"\"
                self.check_pattern(tenant_id, self.tenant_id_regex, "tenant id")
                return await self.service.get_item(tenant_id, item_id)

Note:
    BaseEndpoint.discover() scans appo_server.entities for endpoint
    modules, one subpackage per entity.
"""

from __future__ import annotations

import importlib
import inspect
import pkgutil
import re
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, get_type_hints

from ..errors import InvalidParameterError

if TYPE_CHECKING:
    from ..appo_config import AppoConfig

# Package to scan for entity endpoints
_ENTITIES_PACKAGE = "appo_server.entities"


class BaseEndpoint:
    """Base class for all endpoints with introspection capabilities.

    Attributes:
        name: Endpoint name used for service lookup and CLI groups.
        service: Service collaborator the endpoint delegates to.
        config: AppoConfig the endpoint was built with.
        tenant_id_regex: Compiled tenant id pattern.
        app_instance_id_regex: Compiled application instance id pattern.
    """

    name: str = ""

    def __init__(self, service: Any, config: AppoConfig):
        """Initialize endpoint with service reference and id patterns.

        Args:
            service: Service collaborator for business operations.
            config: AppoConfig providing the id patterns.
        """
        self.service = service
        self.config = config
        self.tenant_id_regex = re.compile(config.tenant_id_pattern)
        self.app_instance_id_regex = re.compile(config.app_instance_id_pattern)

    def check_pattern(self, value: str | None, regex: re.Pattern[str], label: str) -> None:
        """Reject a parameter that does not fully match its pattern.

        Args:
            value: Parameter value to check.
            regex: Compiled pattern the whole value must match.
            label: Parameter description used in the error message.

        Raises:
            InvalidParameterError: If value is None or does not match.
        """
        if value is None or regex.fullmatch(value) is None:
            raise InvalidParameterError(f"Invalid {label}: {value!r}")

    def check_tenant_id(self, tenant_id: str) -> None:
        """Validate a tenant id against the tenant id pattern."""
        self.check_pattern(tenant_id, self.tenant_id_regex, "tenant id")

    def check_app_instance_id(self, app_instance_id: str) -> None:
        """Validate an application instance id against its pattern."""
        self.check_pattern(app_instance_id, self.app_instance_id_regex, "application instance id")

    def get_methods(self) -> list[tuple[str, Callable]]:
        """Return all public async methods for CLI generation.

        Returns:
            List of (method_name, method) tuples for all public
            async methods (excluding those starting with underscore).
        """
        methods = []
        for method_name in dir(self):
            if method_name.startswith("_"):
                continue
            method = getattr(self, method_name)
            if callable(method) and inspect.iscoroutinefunction(method):
                methods.append((method_name, method))
        return methods

    def get_param_types(self, method_name: str) -> list[tuple[str, Any, Any]]:
        """Return (name, annotation, default) for each non-self parameter.

        Args:
            method_name: Name of the method to introspect.

        Returns:
            Parameter descriptions with string annotations resolved.
        """
        method = getattr(self, method_name)
        sig = inspect.signature(method)

        try:
            hints = get_type_hints(method)
        except Exception:
            hints = {}

        params = []
        for param_name, param in sig.parameters.items():
            if param_name == "self":
                continue
            annotation = hints.get(param_name, param.annotation)
            if annotation is inspect.Parameter.empty:
                annotation = str
            params.append((param_name, annotation, param.default))
        return params

    @classmethod
    def discover(cls) -> list[type[BaseEndpoint]]:
        """Autodiscover all endpoint classes from entities/ subpackages.

        Returns:
            List of endpoint classes ready for instantiation.

        Example:
            ::

                for endpoint_class in BaseEndpoint.discover():
                    service = services[endpoint_class.name]
                    endpoints[endpoint_class.name] = endpoint_class(service, config)
        """
        endpoints: list[type[BaseEndpoint]] = []
        for module in cls._find_entity_modules(_ENTITIES_PACKAGE, "endpoint"):
            endpoint_class = cls._get_class_from_module(module, "Endpoint")
            if endpoint_class:
                endpoints.append(endpoint_class)
        return endpoints

    @classmethod
    def _find_entity_modules(cls, base_package: str, module_name: str) -> list[Any]:
        """Find entity modules in a package."""
        result: list[Any] = []
        try:
            package = importlib.import_module(base_package)
        except ImportError:
            return result

        package_path = getattr(package, "__path__", None)
        if not package_path:
            return result

        for _, name, is_pkg in pkgutil.iter_modules(package_path):
            if not is_pkg:
                continue
            full_module_name = f"{base_package}.{name}.{module_name}"
            try:
                result.append(importlib.import_module(full_module_name))
            except ModuleNotFoundError:
                pass
        return result

    @classmethod
    def _get_class_from_module(cls, module: Any, class_suffix: str) -> type | None:
        """Extract an endpoint class from module by suffix pattern."""
        for attr_name in dir(module):
            if attr_name.startswith("_"):
                continue
            obj = getattr(module, attr_name)
            if isinstance(obj, type) and attr_name.endswith(class_suffix):
                if attr_name == "BaseEndpoint":
                    continue
                if not issubclass(obj, BaseEndpoint) or not obj.name:
                    continue
                return obj
        return None


__all__ = ["BaseEndpoint"]
