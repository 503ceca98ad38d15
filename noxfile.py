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

import pathlib

import nox


DEFAULT_PYTHON_VERSION = "3.10"
UNIT_TEST_PYTHON_VERSIONS = ["3.8", "3.9", "3.10", "3.11", "3.12", "3.13"]
BLACK_VERSION = "black[jupyter]==23.7.0"
LINT_PATHS = ["google", "tests", "noxfile.py"]

CURRENT_DIRECTORY = pathlib.Path(__file__).parent.absolute()

nox.options.sessions = ["unit", "lint"]

# Error if a python version is missing
nox.options.error_on_missing_interpreters = True


@nox.session(python=UNIT_TEST_PYTHON_VERSIONS)
def unit(session):
    """Run the unit test suite."""
    session.install("-e", f"{CURRENT_DIRECTORY}[test]")
    session.run(
        "py.test",
        "--quiet",
        "--cov=google.cloud.lro_client_wrapper",
        "--cov-append",
        "--cov-report=",
        "--cov-fail-under=0",
        str(CURRENT_DIRECTORY / "tests" / "unit"),
        *session.posargs,
    )


@nox.session(python=DEFAULT_PYTHON_VERSION)
def blacken(session):
    """Run black. Format code to uniform standard."""
    session.install(BLACK_VERSION)
    session.run("black", *LINT_PATHS)


@nox.session(python=DEFAULT_PYTHON_VERSION)
def lint(session):
    """Run linters.

    Returns a failure if the linters find linting errors or sufficiently
    serious code quality issues.
    """
    session.install("flake8", BLACK_VERSION)
    session.run("black", "--check", *LINT_PATHS)
    session.run("flake8", "google", "tests")
