"""Shared fixtures for the logbench tests"""

import pytest


class FakeCursor:
    def __init__(self, row=None):
        self.row = row

    def fetchone(self):
        return self.row


class FakePgConnection:
    """Stands in for a psycopg connection, keeping a row count per table"""

    def __init__(self, dsn, autocommit=False):
        self.dsn = dsn
        self.autocommit = autocommit
        self.statements = []
        self.rows = {}
        self.closed = False

    def execute(self, sql, params=None):
        self.statements.append((" ".join(sql.split()), params))
        words = sql.split()
        verb = words[0].upper()
        if verb == "CREATE":
            self.rows.setdefault(words[5], 0)
        elif verb == "DELETE":
            self.rows[words[2]] = 0
        elif verb == "INSERT":
            self.rows[words[2]] += 1
        elif verb == "SELECT":
            return FakeCursor((self.rows[words[-1]],))
        return FakeCursor()

    def close(self):
        self.closed = True


@pytest.fixture
def fake_pg(monkeypatch):
    """Route psycopg.connect to FakePgConnection and collect the connections made"""
    from logbench import backends

    connections = []

    def connect(dsn, autocommit=False):
        conn = FakePgConnection(dsn, autocommit=autocommit)
        connections.append(conn)
        return conn

    monkeypatch.setattr(backends.psycopg, "connect", connect)
    return connections


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run inside a temporary directory so default file names stay out of the repo"""
    monkeypatch.chdir(tmp_path)
    return tmp_path
