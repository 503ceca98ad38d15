# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

import logging

from dataclasses import dataclass
from enum import Enum

from google.cloud import compute_v1

from google.cloud.lro_client_wrapper.base import ClientWrapper
from google.cloud.lro_client_wrapper.exceptions import InternalInvariantError
from google.cloud.lro_client_wrapper.exceptions import MissingScopeParameterError
from google.cloud.lro_client_wrapper.exceptions import UnsupportedOperationError
from google.cloud.lro_client_wrapper.exceptions import unsupported_client_type


_LOGGER = logging.getLogger(__name__)

CANCEL_NOT_SUPPORTED = "cancelling operations is not supported by this API"


class OperationsClientType(Enum):
    """The Compute Engine operations client families, by resource scope."""

    GLOBAL = "global"
    GLOBAL_ORGANIZATION = "global_organization"
    REGION = "region"
    ZONE = "zone"


# client class, tag and required options, checked in order
_CLIENT_TYPES: Tuple[Tuple[type, OperationsClientType, Tuple[str, ...]], ...] = (
    (compute_v1.GlobalOperationsClient, OperationsClientType.GLOBAL, ("project",)),
    (
        compute_v1.GlobalOrganizationOperationsClient,
        OperationsClientType.GLOBAL_ORGANIZATION,
        (),
    ),
    (
        compute_v1.RegionOperationsClient,
        OperationsClientType.REGION,
        ("project", "region"),
    ),
    (
        compute_v1.ZoneOperationsClient,
        OperationsClientType.ZONE,
        ("project", "zone"),
    ),
)


@dataclass(frozen=True)
class ScopeParameters:
    """
    Identifiers narrowing which resource an operations client targets.

    Only the fields required by the selected client type are guaranteed to be
    set.
    """

    project: Optional[str] = None
    region: Optional[str] = None
    zone: Optional[str] = None
    parent_id: Optional[str] = None

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]]) -> "ScopeParameters":
        options = options or {}
        return cls(
            project=options.get("project"),
            region=options.get("region"),
            zone=options.get("zone"),
            parent_id=options.get("parent_id"),
        )

    def missing(self, required: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(key for key in required if not getattr(self, key))


def resolve_client_type(
    operations_client,
) -> Tuple[OperationsClientType, Tuple[str, ...]]:
    """
    Find the tag and required options for a Compute Engine operations client.

    Raises:
      - ConfigurationError: if the client is not one of the known types
    """
    for client_class, client_type, required in _CLIENT_TYPES:
        if isinstance(operations_client, client_class):
            return client_type, required
    raise unsupported_client_type(operations_client)


def is_compute_client(operations_client) -> bool:
    return isinstance(
        operations_client, tuple(client_class for client_class, _, _ in _CLIENT_TYPES)
    )


def is_status_done(last_response) -> bool:
    """
    Evaluate a Compute Engine style operation, which reports completion through
    its ``status`` enum rather than a ``done`` flag.
    """
    if last_response is None:
        return False
    status = getattr(last_response, "status", None)
    if status is None:
        return False
    return status == compute_v1.Operation.Status.DONE


class ComputeClientWrapper(ClientWrapper):
    """
    Wrapper for the Compute Engine operations clients.

    Compute Engine operations live under a project and optionally a region or
    zone, so the scope must be supplied with the client:

      - ``GlobalOperationsClient``: ``project``
      - ``GlobalOrganizationOperationsClient``: none, ``parent_id`` is optional
      - ``RegionOperationsClient``: ``project`` and ``region``
      - ``ZoneOperationsClient``: ``project`` and ``zone``

    Compute Engine does not expose a cancel RPC, so :meth:`cancel_operation`
    always raises :class:`UnsupportedOperationError`.

    The scope is passed to the client as keyword arguments, so forwarded
    calls take call settings (``retry``, ``timeout``, ``metadata``) as
    keywords. Extra positional arguments are accepted and ignored; the
    captured scope already identifies the operation.

    Args:
      - operations_client: one of the Compute Engine operations clients
      - options: mapping holding the scoping options listed above
    Raises:
      - ConfigurationError: if the client is of an unknown type
      - MissingScopeParameterError: if a required option is absent or empty
    """

    def __init__(self, operations_client, options: Optional[Mapping[str, Any]] = None):
        client_type, required = resolve_client_type(operations_client)
        scope = ScopeParameters.from_options(options)
        missing = scope.missing(required)
        if missing:
            raise MissingScopeParameterError(
                operations_client.__class__.__name__, missing
            )
        super().__init__(operations_client)
        self._client_type = client_type
        self._scope = scope
        _LOGGER.debug(
            "Wrapping %s as a %s compute operations client",
            operations_client.__class__.__name__,
            client_type.value,
        )

    @property
    def client_type(self) -> OperationsClientType:
        return self._client_type

    @property
    def scope(self) -> ScopeParameters:
        return self._scope

    def is_done(self, last_response: Optional[compute_v1.Operation] = None) -> bool:
        return is_status_done(last_response)

    def get_operation(self, name: str, *args, **kwargs) -> compute_v1.Operation:
        client = self._operations_client
        scope = self._scope
        if self._client_type is OperationsClientType.GLOBAL:
            return client.get(project=scope.project, operation=name, **kwargs)
        elif self._client_type is OperationsClientType.GLOBAL_ORGANIZATION:
            if scope.parent_id:
                request = compute_v1.GetGlobalOrganizationOperationRequest(
                    operation=name, parent_id=scope.parent_id
                )
                return client.get(request, **kwargs)
            return client.get(operation=name, **kwargs)
        elif self._client_type is OperationsClientType.REGION:
            return client.get(
                project=scope.project,
                region=scope.region,
                operation=name,
                **kwargs,
            )
        elif self._client_type is OperationsClientType.ZONE:
            return client.get(
                project=scope.project,
                zone=scope.zone,
                operation=name,
                **kwargs,
            )
        raise InternalInvariantError(
            f"Invalid operations client type: {self._client_type!r}"
        )

    def cancel_operation(self, name: str, *args, **kwargs) -> None:
        raise UnsupportedOperationError(CANCEL_NOT_SUPPORTED)

    def delete_operation(self, name: str, *args, **kwargs):
        client = self._operations_client
        scope = self._scope
        if self._client_type is OperationsClientType.GLOBAL:
            return client.delete(project=scope.project, operation=name, **kwargs)
        elif self._client_type is OperationsClientType.GLOBAL_ORGANIZATION:
            if scope.parent_id:
                request = compute_v1.DeleteGlobalOrganizationOperationRequest(
                    operation=name, parent_id=scope.parent_id
                )
                return client.delete(request, **kwargs)
            return client.delete(operation=name, **kwargs)
        elif self._client_type is OperationsClientType.REGION:
            return client.delete(
                project=scope.project,
                region=scope.region,
                operation=name,
                **kwargs,
            )
        elif self._client_type is OperationsClientType.ZONE:
            return client.delete(
                project=scope.project,
                zone=scope.zone,
                operation=name,
                **kwargs,
            )
        raise InternalInvariantError(
            f"Invalid operations client type: {self._client_type!r}"
        )
