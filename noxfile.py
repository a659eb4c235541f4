import nox

PYTHON_VERSIONS = ["3.11", "3.12", "3.13"]


def _install(session: nox.Session) -> None:
    """Install the project with all test extras into the nox virtualenv."""
    session.install("-e", ".[test,postgresql]")


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run full test suite across Python versions."""
    _install(session)
    session.run("pytest", *session.posargs)


@nox.session(python=PYTHON_VERSIONS)
def tests_domain(session: nox.Session) -> None:
    """Run domain-layer tests only (no database required)."""
    _install(session)
    session.run(
        "pytest",
        "tests/catalogue/domain/",
        "tests/ordering/domain/",
        "tests/shared/domain/",
    )


@nox.session(python=PYTHON_VERSIONS[-1])
def tests_postgresql(session: nox.Session) -> None:
    """Run the placement tests against PostgreSQL.

    Expects STOREFRONT_TEST_DATABASE_URI to point at a disposable database.
    """
    _install(session)
    session.run("pytest", "tests/ordering/application/")
