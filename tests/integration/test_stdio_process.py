"""
STDIO process lifecycle integration tests

Runs ``src/main.py`` as a real subprocess with stdin held open. No MySQL
server is needed: the connection is lazy and no request is sent.
"""

import os
import signal
import subprocess
import sys
import threading
from pathlib import Path

import pytest

MAIN = Path(__file__).parent.parent.parent / "src" / "main.py"
READY_LINE = "Starting STDIO MCP server"

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals only")


@pytest.fixture
def server_process(tmp_path):
    """Start the server and wait until the transport is attached"""
    env = dict(os.environ)
    env.update({"MYSQL_HOST": "127.0.0.1", "MYSQL_USER": "root", "LOG_LEVEL": "INFO"})
    env.pop("ENV_FILE_PATH", None)
    env.pop("MYSQL_CONNECT_ON_STARTUP", None)

    proc = subprocess.Popen(
        [sys.executable, str(MAIN)],
        stdin=subprocess.PIPE,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        cwd=str(tmp_path),
        env=env,
        text=True,
    )

    ready = threading.Event()
    lines = []

    def drain_stderr():
        for line in proc.stderr:
            lines.append(line)
            if READY_LINE in line:
                ready.set()

    reader = threading.Thread(target=drain_stderr, daemon=True)
    reader.start()

    try:
        assert ready.wait(timeout=20), "server did not start:\n" + "".join(lines)
        yield proc, lines
    finally:
        if proc.poll() is None:
            proc.kill()
            proc.wait()
        for stream in (proc.stdin, proc.stdout):
            stream.close()
        reader.join(timeout=5)


class TestProcessShutdown:
    """Exit behaviour of the stdio entry point"""

    @pytest.mark.parametrize("sig", [signal.SIGTERM, signal.SIGINT])
    def test_signal_with_stdin_open_exits_0(self, server_process, sig):
        """✅ a stop signal ends the process even though stdin stays open"""
        proc, lines = server_process

        proc.send_signal(sig)

        try:
            returncode = proc.wait(timeout=10)
        except subprocess.TimeoutExpired:
            pytest.fail("still running 10s after signal:\n" + "".join(lines))
        assert returncode == 0

    def test_stdin_closed_exits_0(self, server_process):
        """✅ closing stdin ends the process"""
        proc, lines = server_process

        proc.stdin.close()

        try:
            returncode = proc.wait(timeout=10)
        except subprocess.TimeoutExpired:
            pytest.fail("still running 10s after stdin closed:\n" + "".join(lines))
        assert returncode == 0
