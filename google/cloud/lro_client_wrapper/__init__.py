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
from google.cloud.lro_client_wrapper import gapic_version as package_version

from google.cloud.lro_client_wrapper.base import ClientWrapper
from google.cloud.lro_client_wrapper.default import DefaultClientWrapper
from google.cloud.lro_client_wrapper.compute import ComputeClientWrapper
from google.cloud.lro_client_wrapper.compute import OperationsClientType
from google.cloud.lro_client_wrapper.compute import ScopeParameters
from google.cloud.lro_client_wrapper.additional_args import AdditionalArgsClientWrapper
from google.cloud.lro_client_wrapper.factory import from_operations_client

from google.cloud.lro_client_wrapper.exceptions import ClientWrapperError
from google.cloud.lro_client_wrapper.exceptions import ConfigurationError
from google.cloud.lro_client_wrapper.exceptions import MissingScopeParameterError
from google.cloud.lro_client_wrapper.exceptions import UnsupportedOperationError
from google.cloud.lro_client_wrapper.exceptions import InternalInvariantError
from google.cloud.lro_client_wrapper.exceptions import TransportError

__version__: str = package_version.__version__

__all__ = (
    "ClientWrapper",
    "DefaultClientWrapper",
    "ComputeClientWrapper",
    "OperationsClientType",
    "ScopeParameters",
    "AdditionalArgsClientWrapper",
    "from_operations_client",
    "ClientWrapperError",
    "ConfigurationError",
    "MissingScopeParameterError",
    "UnsupportedOperationError",
    "InternalInvariantError",
    "TransportError",
)
