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

from typing import Sequence

from google.api_core import exceptions as core_exceptions

# Errors raised by the wrapped client during a forwarded call. These are
# never caught by the wrappers; the alias exists for callers' except clauses.
TransportError = core_exceptions.GoogleAPICallError


class ClientWrapperError(Exception):
    """Base class for errors raised by the wrappers themselves."""


class ConfigurationError(ClientWrapperError, ValueError):
    """
    Raised at construction time when a wrapper cannot be built for the
    supplied operations client and options.
    """


class MissingScopeParameterError(ConfigurationError):
    """
    Raised when an operations client requires scoping options that were not
    supplied.

    Args:
      - client_type: name of the operations client class
      - missing: the names of the missing options, in declaration order
    """

    def __init__(self, client_type: str, missing: Sequence[str]):
        self.client_type = client_type
        self.missing = tuple(missing)
        super().__init__(
            f"{client_type} requires the {' and '.join(self.missing)} option"
            f"{'s' if len(self.missing) > 1 else ''}"
        )


class UnsupportedOperationError(core_exceptions.MethodNotImplemented):
    """
    Raised when an operation is invoked on a wrapper whose client has no
    equivalent RPC, e.g. cancelling a Compute Engine operation.
    """


class InternalInvariantError(ClientWrapperError, RuntimeError):
    """Raised when a wrapper reaches a dispatch branch it should never reach."""


def unsupported_client_type(operations_client) -> ConfigurationError:
    return ConfigurationError(
        f"Unsupported client type: {operations_client.__class__.__name__}"
    )
