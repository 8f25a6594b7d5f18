# tests/test_migrations.py
import importlib.util
import io
import os
import unittest

import helpers  # noqa: F401

from alembic.migration import MigrationContext
from alembic.operations import Operations

from shadowing.models.user import User

VERSIONS_DIR = os.path.join(os.path.dirname(__file__), '..', 'backend', 'migrations', 'versions')


def load_revision(filename):
    spec = importlib.util.spec_from_file_location(filename[:-3], os.path.join(VERSIONS_DIR, filename))
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def render_upgrade(revision) -> str:
    """Run a revision's upgrade() in offline mode and return the PostgreSQL DDL."""
    buffer = io.StringIO()
    context = MigrationContext.configure(
        dialect_name="postgresql",
        opts={"as_sql": True, "output_buffer": buffer},
    )
    with Operations.context(context):
        revision.upgrade()
    return buffer.getvalue()


class TestInitialSchema(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.sql = render_upgrade(load_revision("001_initial_schema.py"))

    def table_ddl(self, table):
        return self.sql.split(f"CREATE TABLE {table} (", 1)[1].split(";", 1)[0]

    def test_user_email_has_a_single_unique_index(self):
        users = self.table_ddl("users")
        self.assertNotIn("UNIQUE (email)", users)
        self.assertIn("CREATE UNIQUE INDEX ix_users_email ON users (email)", self.sql)

    def test_model_declares_the_same_unique_index(self):
        unique_indexes = {index.name for index in User.__table__.indexes if index.unique}
        self.assertIn("ix_users_email", unique_indexes)
        self.assertFalse([
            constraint for constraint in User.__table__.constraints
            if constraint.__class__.__name__ == "UniqueConstraint"
        ])

    def test_profiles_are_unique_per_user(self):
        for table in ("student_profiles", "business_profiles"):
            self.assertIn("UNIQUE (user_id)", self.table_ddl(table))


if __name__ == '__main__':
    unittest.main()
