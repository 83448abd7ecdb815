#!/usr/bin/env python3
"""
Tests for engine and session wiring.
"""

import unittest

from sqlalchemy import inspect

from core.config_loader import get_config
from database import database
from database.init_db import init_db
from database.models import Base


class TestDatabaseWiring(unittest.TestCase):

    def setUp(self):
        self.original_engine = database.get_engine()

    def tearDown(self):
        database.engine = self.original_engine
        database.SessionLocal.configure(bind=self.original_engine)

    def test_engine_uses_configured_url(self):
        url = database.get_engine().url.render_as_string(hide_password=False)
        self.assertEqual(url, get_config().database.url)

    def test_configure_database_rebinds_sessions(self):
        engine = database.configure_database("sqlite://")

        self.assertIs(database.get_engine(), engine)
        self.assertEqual(engine.url.drivername, "sqlite")
        session = database.SessionLocal()
        try:
            self.assertIs(session.get_bind(), engine)
        finally:
            session.close()

    def test_init_db_uses_configured_engine(self):
        engine = database.configure_database("sqlite://")
        init_db()
        self.assertTrue(set(Base.metadata.tables) <= set(inspect(engine).get_table_names()))


if __name__ == '__main__':
    unittest.main(verbosity=2)
