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

from typing import Any, Optional, Sequence

import logging

from google.cloud.lro_client_wrapper.base import ClientWrapper
from google.cloud.lro_client_wrapper.compute import CANCEL_NOT_SUPPORTED
from google.cloud.lro_client_wrapper.compute import is_status_done
from google.cloud.lro_client_wrapper.exceptions import ConfigurationError
from google.cloud.lro_client_wrapper.exceptions import UnsupportedOperationError
from google.cloud.lro_client_wrapper.exceptions import unsupported_client_type


_LOGGER = logging.getLogger(__name__)


class AdditionalArgsClientWrapper(ClientWrapper):
    """
    Wrapper for operations clients whose ``get`` and ``delete`` methods take
    the operation name followed by extra positional arguments, such as a
    project and location.

    Operations are expected to report completion through a Compute Engine
    style ``status`` field. Cancelling is not supported.

    Args:
      - operations_client: any object with callable ``get`` and ``delete``
          attributes
      - additional_args: positional arguments appended after the operation
          name on every call, before any arguments given to the call itself
    Raises:
      - ConfigurationError: if the client lacks ``get`` or ``delete``, or
          ``additional_args`` is a single string rather than a sequence
    """

    def __init__(self, operations_client, additional_args: Sequence[Any] = ()):
        if not all(
            callable(getattr(operations_client, method, None))
            for method in ("get", "delete")
        ):
            raise unsupported_client_type(operations_client)
        if isinstance(additional_args, (str, bytes)):
            raise ConfigurationError(
                "additional_args must be a sequence of arguments, not "
                f"{additional_args.__class__.__name__}"
            )
        super().__init__(operations_client)
        self._additional_args = tuple(additional_args)
        _LOGGER.debug(
            "Wrapping %s with %d additional arguments",
            operations_client.__class__.__name__,
            len(self._additional_args),
        )

    @property
    def additional_args(self):
        return self._additional_args

    def is_done(self, last_response: Optional[Any] = None) -> bool:
        return is_status_done(last_response)

    def get_operation(self, name: str, *args, **kwargs):
        return self._operations_client.get(
            name, *self._additional_args, *args, **kwargs
        )

    def cancel_operation(self, name: str, *args, **kwargs) -> None:
        raise UnsupportedOperationError(CANCEL_NOT_SUPPORTED)

    def delete_operation(self, name: str, *args, **kwargs):
        return self._operations_client.delete(
            name, *self._additional_args, *args, **kwargs
        )
