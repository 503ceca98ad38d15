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

from typing import Any, Optional

import abc


class ClientWrapper(abc.ABC):
    """
    Uniform view over the operations client backing a long-running operation.

    A poller holds one ClientWrapper per tracked operation and uses it to
    refresh, cancel and delete the operation without knowing which generated
    client family sits underneath.

    Every forwarding method performs at most one call on the wrapped client
    and returns its result unchanged. Errors raised by the wrapped client
    (:class:`google.api_core.exceptions.GoogleAPICallError` and subclasses)
    propagate to the caller untouched.

    Wrappers only hold the client and the immutable scope captured at
    construction, so they are as safe to share across threads as the wrapped
    client is. That property is inherited, not provided, by this layer.

    Args:
      - operations_client: the generated client to forward calls to
    """

    def __init__(self, operations_client):
        self._operations_client = operations_client

    @property
    def operations_client(self):
        """The client object used to make requests to the operations API."""
        return self._operations_client

    def get_operations_client(self):
        """Same as :attr:`operations_client`."""
        return self._operations_client

    @abc.abstractmethod
    def is_done(self, last_response: Optional[Any] = None) -> bool:
        """
        Check whether the operation has completed.

        Args:
          - last_response: the most recent operation fetched for this
              operation, or None if nothing has been fetched yet
        Returns:
          - False when there is no response or it carries no completion
              state, otherwise whether the response reports completion
        """
        raise NotImplementedError

    @abc.abstractmethod
    def get_operation(self, name: str, *args, **kwargs):
        """
        Fetch the latest state of the named operation.

        Args:
          - name: the operation name
          - *args: extra positional arguments appended to the client call
          - **kwargs: call settings (``retry``, ``timeout``, ``metadata``)
              passed through to the client
        Returns:
          - the operation as returned by the wrapped client
        Raises:
          - google.api_core.exceptions.GoogleAPICallError: if the call fails
        """
        raise NotImplementedError

    @abc.abstractmethod
    def cancel_operation(self, name: str, *args, **kwargs) -> None:
        """
        Start asynchronous cancellation of the named operation.

        The server makes a best effort to cancel the operation, but success
        is not guaranteed. On success the operation is not deleted; it
        finishes with an error of code ``CANCELLED``.

        Raises:
          - google.cloud.lro_client_wrapper.exceptions.UnsupportedOperationError:
              if the wrapped client has no cancel RPC
          - google.api_core.exceptions.GoogleAPICallError: if the call fails
        """
        raise NotImplementedError

    @abc.abstractmethod
    def delete_operation(self, name: str, *args, **kwargs):
        """
        Delete the named operation. This signals that the caller is no longer
        interested in the result; it does not cancel the operation.

        Raises:
          - google.api_core.exceptions.GoogleAPICallError: if the call fails
        """
        raise NotImplementedError

    def cancel(self, name: str, *args, **kwargs) -> None:
        """Alias for :meth:`cancel_operation`."""
        return self.cancel_operation(name, *args, **kwargs)

    def delete(self, name: str, *args, **kwargs):
        """Alias for :meth:`delete_operation`."""
        return self.delete_operation(name, *args, **kwargs)

    def __repr__(self):
        return f"{self.__class__.__name__}({self._operations_client!r})"
