"""nox configuration for wikiui.

The live scenarios are not part of the default sessions because they need a
browser or an Appium server. Pass ``--run-web`` or ``--run-mobile`` after
``--`` to the ``test`` session to run them.
"""

import nox
from nox_uv import session

# Default sessions.
nox.options.sessions = ["typing", "test-coverage", "coverage-report"]

# Other nox defaults.
nox.options.default_venv_backend = "uv"
nox.options.reuse_existing_virtualenvs = True


@session(name="coverage-report", uv_groups=["dev"])
def coverage_report(session: nox.Session) -> None:
    """Generate a code coverage report from the test suite."""
    session.run("coverage", "report", *session.posargs)


@session(uv_groups=["dev"])
def test(session: nox.Session) -> None:
    """Run the unit tests, and the live scenarios if requested."""
    session.run("pytest", *session.posargs)


@session(name="test-coverage", uv_groups=["dev"])
def test_coverage(session: nox.Session) -> None:
    """Run the unit tests with coverage."""
    session.run(
        "pytest",
        "--cov=wikiui",
        "--cov-branch",
        "--cov-report=",
        *session.posargs,
    )


@session(uv_groups=["dev", "typing"])
def typing(session: nox.Session) -> None:
    """Run mypy."""
    session.run(
        "mypy",
        *session.posargs,
        "--namespace-packages",
        "--explicit-package-bases",
        "noxfile.py",
        "src",
        "tests",
        env={"MYPYPATH": "src"},
    )
