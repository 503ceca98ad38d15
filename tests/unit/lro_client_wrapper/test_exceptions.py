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

from grpc import StatusCode
from google.api_core import exceptions as core_exceptions

from google.cloud.lro_client_wrapper import exceptions


class TestMissingScopeParameterError:
    def test_single(self):
        err = exceptions.MissingScopeParameterError(
            "GlobalOperationsClient", ["project"]
        )
        assert str(err) == "GlobalOperationsClient requires the project option"
        assert err.missing == ("project",)
        assert err.client_type == "GlobalOperationsClient"

    def test_multiple(self):
        err = exceptions.MissingScopeParameterError(
            "RegionOperationsClient", ("project", "region")
        )
        assert (
            str(err) == "RegionOperationsClient requires the project and region options"
        )

    def test_hierarchy(self):
        err = exceptions.MissingScopeParameterError("ZoneOperationsClient", ["zone"])
        assert isinstance(err, exceptions.ConfigurationError)
        assert isinstance(err, exceptions.ClientWrapperError)
        assert isinstance(err, ValueError)


def test_unsupported_operation_error():
    err = exceptions.UnsupportedOperationError("cannot cancel")
    assert isinstance(err, core_exceptions.GoogleAPICallError)
    assert isinstance(err, exceptions.TransportError)
    assert err.code == 501
    assert err.grpc_status_code == StatusCode.UNIMPLEMENTED
    assert err.message == "cannot cancel"


def test_internal_invariant_error():
    with pytest.raises(RuntimeError):
        raise exceptions.InternalInvariantError("unreachable")
    assert not issubclass(exceptions.InternalInvariantError, ValueError)


def test_unsupported_client_type():
    class MyClient:
        pass

    err = exceptions.unsupported_client_type(MyClient())
    assert isinstance(err, exceptions.ConfigurationError)
    assert str(err) == "Unsupported client type: MyClient"
