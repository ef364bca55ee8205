from pathlib import Path

from lab_attendance.database.bootstrap import _strip_create_db_and_use, _strip_line_comments, iter_sql_statements

SCHEMA = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def test_splitter_keeps_semicolons_inside_literals():
    sql = "INSERT INTO t VALUES ('a;b'); SELECT \"x;\";\nSELECT 1"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", 'SELECT "x;"', "SELECT 1"]


def test_splitter_handles_escaped_quotes_and_blank_statements():
    sql = "SELECT 'it\\'s;fine';;  ;"

    assert list(iter_sql_statements(sql)) == ["SELECT 'it\\'s;fine'"]


def test_schema_file_is_database_agnostic():
    sql = _strip_line_comments(_strip_create_db_and_use(SCHEMA.read_text(encoding="utf-8")))
    statements = list(iter_sql_statements(sql))

    assert statements
    assert all(s.upper().startswith("CREATE TABLE") for s in statements)
    assert statements[0].startswith("CREATE TABLE IF NOT EXISTS staff (")
    assert len(statements) == 7
