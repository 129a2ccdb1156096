""" Invoke tasks. """
import os
import sys
import io
from invoke.tasks import task

if isinstance(sys.stdout, io.TextIOWrapper):
    sys.stdout.reconfigure(encoding='utf-8')


@task
def install(c):
    c.run('pip install -e ".[test]"')


@task
def demo(c):
    """Replay both ledger demonstrations."""
    from main import main

    main()


@task
def timetable(c):
    """Replay the scheduling ledger demonstration only."""
    from main import run_timetable_demo
    from utils.logger import setup_logging

    setup_logging()
    run_timetable_demo()


@task
def registry(c):
    """Replay the registration ledger demonstration only."""
    from main import run_registry_demo
    from utils.logger import setup_logging

    setup_logging()
    run_registry_demo()


@task
def test(c):
    c.run("pytest -q tests", env={"PYTHONUTF8": "1", "LOG_TO_FILE": "false"})


@task
def clean(c):
    """
    Cross-platform clean task to remove all __pycache__ folders, .pyc files and run logs.
    """
    if os.name == 'nt':  # Windows
        # Remove all .pyc files
        c.run("for /R %f in (*.pyc) do del /F /Q \"%f\"", warn=True)
        # Remove all __pycache__ directories recursively
        c.run('for /d /r %d in (__pycache__) do @if exist "%d" rmdir /s /q "%d"', warn=True)
        c.run("del /F /Q ledger_run.log", warn=True)
    else:  # Unix/Linux/macOS
        c.run("find . -type f -name '*.pyc' -delete", warn=True)
        c.run("find . -type d -name '__pycache__' -exec rm -r {} +", warn=True)
        c.run("rm -f ledger_run.log", warn=True)
