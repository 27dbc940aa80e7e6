"""Invoke tasks for WineStock development."""

from pathlib import Path

from invoke import task
from invoke.context import Context

DB_FILE = Path("data/winestock.db")


@task
def test(ctx: Context, verbose: bool = False, coverage: bool = False) -> None:
    """Run the test suite.

    Args:
        ctx: Invoke context
        verbose: Enable verbose output
        coverage: Run with coverage report
    """
    cmd = "uv run pytest"
    if verbose:
        cmd += " -v"
    if coverage:
        cmd += " --cov=winestock --cov-report=term-missing"
    ctx.run(cmd, pty=True)


@task(name="init-db")
def init_db(ctx: Context) -> None:
    """Create the SQLite inventory database and list its contents."""
    print("Initializing database...")
    ctx.run("uv run winestock list", env={"WINESTOCK_STORAGE_BACKEND": "sqlite"}, pty=True)
    print(f"Database ready at {DB_FILE}")


@task
def clean(ctx: Context, all: bool = False) -> None:
    """Clean up temporary files.

    Args:
        ctx: Invoke context
        all: Also remove the inventory database
    """
    for pattern in ["__pycache__", "*.pyc", "*.pyo", ".pytest_cache"]:
        ctx.run(f"find . -name '{pattern}' -exec rm -rf {{}} + 2>/dev/null || true", warn=True)

    for path in ["build", "dist", "*.egg-info", ".eggs"]:
        ctx.run(f"rm -rf {path} 2>/dev/null || true", warn=True)

    if all and DB_FILE.exists():
        print(f"Removing database: {DB_FILE}")
        DB_FILE.unlink()

    print("Cleanup complete")
