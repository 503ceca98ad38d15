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

from typing import Any, Mapping, Optional

from google.cloud.lro_client_wrapper.additional_args import AdditionalArgsClientWrapper
from google.cloud.lro_client_wrapper.base import ClientWrapper
from google.cloud.lro_client_wrapper.compute import ComputeClientWrapper
from google.cloud.lro_client_wrapper.compute import is_compute_client
from google.cloud.lro_client_wrapper.default import DefaultClientWrapper
from google.cloud.lro_client_wrapper.default import SUPPORTED_CLIENT_TYPES
from google.cloud.lro_client_wrapper.exceptions import unsupported_client_type


def from_operations_client(
    operations_client, options: Optional[Mapping[str, Any]] = None
) -> ClientWrapper:
    """
    Build the wrapper matching an operations client.

    Args:
      - operations_client: the client backing the long-running operation
      - options: wrapper options. ``project``, ``region``, ``zone`` and
          ``parent_id`` scope Compute Engine clients. ``additional_args``
          wraps any other client in an :class:`AdditionalArgsClientWrapper`;
          it is ignored for Operations API and Compute Engine clients
    Returns:
      - a ClientWrapper forwarding to ``operations_client``
    Raises:
      - ConfigurationError: if no wrapper supports the client, or the
          options it requires are missing
    """
    options = options or {}
    if isinstance(operations_client, SUPPORTED_CLIENT_TYPES):
        return DefaultClientWrapper(operations_client)
    if is_compute_client(operations_client):
        return ComputeClientWrapper(operations_client, options)
    if "additional_args" in options:
        return AdditionalArgsClientWrapper(
            operations_client, options["additional_args"]
        )
    raise unsupported_client_type(operations_client)
