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

import pytest

from unittest import mock

from google.api_core import exceptions as core_exceptions
from google.cloud import compute_v1

from google.cloud.lro_client_wrapper import exceptions
from google.cloud.lro_client_wrapper.additional_args import AdditionalArgsClientWrapper


OPERATION_NAME = "operation-5678"


class _OperationsClient:
    def get(self, name, *args, **kwargs):
        raise NotImplementedError

    def delete(self, name, *args, **kwargs):
        raise NotImplementedError


class TestAdditionalArgsClientWrapper:
    @staticmethod
    def _make_one(additional_args=()):
        client = mock.create_autospec(_OperationsClient, instance=True)
        return AdditionalArgsClientWrapper(client, additional_args), client

    def test_ctor(self):
        wrapper, client = self._make_one(["my-project", "us-east1"])
        assert wrapper.operations_client is client
        assert wrapper.get_operations_client() is client
        assert wrapper.additional_args == ("my-project", "us-east1")

    @pytest.mark.parametrize("client", [object(), None, 42])
    def test_ctor_unsupported_client(self, client):
        with pytest.raises(exceptions.ConfigurationError) as e:
            AdditionalArgsClientWrapper(client)
        assert "Unsupported client type" in str(e.value)

    @pytest.mark.parametrize("additional_args", ["my-project", b"my-project"])
    def test_ctor_string_additional_args(self, additional_args):
        client = mock.create_autospec(_OperationsClient, instance=True)
        with pytest.raises(exceptions.ConfigurationError) as e:
            AdditionalArgsClientWrapper(client, additional_args)
        assert "must be a sequence of arguments" in str(e.value)
        assert client.mock_calls == []

    def test_ctor_non_callable_methods(self):
        client = mock.Mock(get="not callable")
        with pytest.raises(exceptions.ConfigurationError):
            AdditionalArgsClientWrapper(client)

    def test_is_done(self):
        wrapper, _ = self._make_one()
        done = compute_v1.Operation(status=compute_v1.Operation.Status.DONE)
        running = compute_v1.Operation(status=compute_v1.Operation.Status.RUNNING)
        assert wrapper.is_done(done) is True
        assert wrapper.is_done(running) is False
        assert wrapper.is_done(None) is False
        assert wrapper.is_done(mock.Mock(status=None)) is False

    def test_get_operation(self):
        wrapper, client = self._make_one(("my-project", "us-east1"))
        result = wrapper.get_operation(OPERATION_NAME)
        assert result is client.get.return_value
        client.get.assert_called_once_with(OPERATION_NAME, "my-project", "us-east1")

    def test_get_operation_call_args(self):
        wrapper, client = self._make_one(("my-project",))
        wrapper.get_operation(OPERATION_NAME, "extra", timeout=2)
        client.get.assert_called_once_with(
            OPERATION_NAME, "my-project", "extra", timeout=2
        )

    def test_get_operation_propagates_errors(self):
        wrapper, client = self._make_one()
        client.get.side_effect = core_exceptions.InternalServerError("boom")
        with pytest.raises(core_exceptions.InternalServerError):
            wrapper.get_operation(OPERATION_NAME)

    def test_delete_operation(self):
        wrapper, client = self._make_one(("my-project", "us-east1"))
        result = wrapper.delete_operation(OPERATION_NAME)
        assert result is client.delete.return_value
        client.delete.assert_called_once_with(OPERATION_NAME, "my-project", "us-east1")

    def test_cancel_unsupported(self):
        wrapper, client = self._make_one(("my-project",))
        with pytest.raises(exceptions.UnsupportedOperationError):
            wrapper.cancel_operation(OPERATION_NAME)
        with pytest.raises(exceptions.UnsupportedOperationError):
            wrapper.cancel(OPERATION_NAME)
        assert client.mock_calls == []
