"""nox configuration for jwthandler."""

import nox
from nox_uv import session

# Default sessions.
nox.options.sessions = ["typing", "test-coverage", "coverage-report"]

# Other nox defaults.
nox.options.default_venv_backend = "uv"
nox.options.reuse_existing_virtualenvs = True


@session(name="coverage-report", uv_extras=["dev"])
def coverage_report(session: nox.Session) -> None:
    """Report the coverage collected by the test-coverage session."""
    session.run("coverage", "report", *session.posargs)


@session(uv_extras=["dev"])
def test(session: nox.Session) -> None:
    """Run the jwthandler tests without coverage analysis."""
    session.run("pytest", *session.posargs)


@session(name="test-coverage", uv_extras=["dev"])
def test_coverage(session: nox.Session) -> None:
    """Run the jwthandler tests with branch coverage of the package."""
    session.run(
        "pytest",
        "--cov=jwthandler",
        "--cov-branch",
        "--cov-report=",
        *session.posargs,
    )


@session(uv_extras=["dev", "typing"])
def typing(session: nox.Session) -> None:
    """Type-check the package, its tests and this file with mypy."""
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
