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

from typing import Optional, Union, TYPE_CHECKING

import logging

from google.api_core import operations_v1

from google.cloud.lro_client_wrapper.base import ClientWrapper
from google.cloud.lro_client_wrapper.exceptions import unsupported_client_type

if TYPE_CHECKING:
    from google.longrunning import operations_pb2


_LOGGER = logging.getLogger(__name__)

SUPPORTED_CLIENT_TYPES = (
    operations_v1.OperationsClient,
    operations_v1.AbstractOperationsClient,
)


class DefaultClientWrapper(ClientWrapper):
    """
    Wrapper for services implementing the ``google.longrunning.Operations``
    API.

    Operations are resolved by name alone, so no scoping options are needed.
    Any extra positional or keyword arguments given to a call are appended to
    the forwarded client call.

    Args:
      - operations_client: an :class:`google.api_core.operations_v1.OperationsClient`
          or :class:`google.api_core.operations_v1.AbstractOperationsClient`
    Raises:
      - ConfigurationError: if the client is of any other type
    """

    def __init__(
        self,
        operations_client: Union[
            operations_v1.OperationsClient, operations_v1.AbstractOperationsClient
        ],
    ):
        if not isinstance(operations_client, SUPPORTED_CLIENT_TYPES):
            raise unsupported_client_type(operations_client)
        super().__init__(operations_client)
        _LOGGER.debug(
            "Wrapping %s as a default operations client",
            operations_client.__class__.__name__,
        )

    def is_done(self, last_response: Optional[operations_pb2.Operation] = None) -> bool:
        if last_response is None:
            return False
        done = getattr(last_response, "done", None)
        if done is None:
            return False
        return bool(done)

    def get_operation(self, name: str, *args, **kwargs) -> operations_pb2.Operation:
        return self._operations_client.get_operation(name, *args, **kwargs)

    def cancel_operation(self, name: str, *args, **kwargs) -> None:
        self._operations_client.cancel_operation(name, *args, **kwargs)

    def delete_operation(self, name: str, *args, **kwargs) -> None:
        self._operations_client.delete_operation(name, *args, **kwargs)
