"""
Pytest configuration for alternating-path tests.

IMPL=py (default) drives the library through py/cli.py in a subprocess,
IMPL=inproc calls the installed package directly.
"""
import pytest
import subprocess
import json
import os
import sys

# Get implementation type from environment variable
IMPL = os.environ.get("IMPL", "py")

# Normalize implementation names
if IMPL in ("python", "py"):
    IMPL = "python"

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
PY_DIR = os.path.join(BASE_DIR, "py")


def run_cli(cmd, *args, raw_input=None):
    """Run py/cli.py once and return the completed process."""
    input_data = raw_input if raw_input is not None else json.dumps(list(args))
    argv = [sys.executable, "cli.py"]
    if cmd is not None:
        argv.append(cmd)
    return subprocess.run(
        argv,
        cwd=PY_DIR,
        input=input_data,
        capture_output=True,
        text=True
    )


def load_python_impl():
    """Load Python implementation via subprocess + CLI."""

    class PyBridge:
        def _call(self, cmd, *args):
            result = run_cli(cmd, *args)
            if result.returncode != 0:
                try:
                    error = json.loads(result.stdout)["error"]
                except (ValueError, KeyError):
                    raise RuntimeError(result.stderr)
                raise ValueError(error)
            return json.loads(result.stdout)

        def shortest_alternating_paths(self, n, red_edges, blue_edges):
            return self._call("shortest_alternating_paths", n, red_edges, blue_edges)

        def alternating_paths(self, n, red_edges, blue_edges):
            return self._call("alternating_paths", n, red_edges, blue_edges)

    return PyBridge()


def load_inproc_impl():
    """Call the package directly; results are passed through JSON like the CLI."""
    import altpaths

    class InprocBridge:
        def _call(self, func, *args):
            return json.loads(json.dumps(func(*args)))

        def shortest_alternating_paths(self, n, red_edges, blue_edges):
            return self._call(altpaths.shortest_alternating_paths, n, red_edges, blue_edges)

        def alternating_paths(self, n, red_edges, blue_edges):
            return self._call(altpaths.alternating_paths, n, red_edges, blue_edges)

    return InprocBridge()


@pytest.fixture
def lib():
    """Load the implementation selected by the IMPL env var."""
    if IMPL == "python":
        return load_python_impl()
    elif IMPL == "inproc":
        return load_inproc_impl()
    else:
        raise ValueError(f"Unknown implementation: {IMPL}")


@pytest.fixture
def client():
    """Flask test client for the HTTP API."""
    from altpaths.server import create_app

    app = create_app()
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client
