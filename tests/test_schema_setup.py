import os
import tempfile
import unittest

from sqlalchemy import delete, inspect
from sqlalchemy.exc import IntegrityError


class TestSchemaSetup(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        db_fd, cls.db_path = tempfile.mkstemp(suffix=".db")
        os.close(db_fd)

        from app import create_app
        from app.db import db
        from app.models.blog_model import Blog
        from app.models.comment_model import Comment
        from app.services import setup_service

        cls.app = create_app({
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{cls.db_path}",
        })
        cls.db = db
        cls.Blog = Blog
        cls.Comment = Comment
        cls.setup_service = setup_service

    @classmethod
    def tearDownClass(cls):
        with cls.app.app_context():
            cls.db.engine.dispose()
        if os.path.exists(cls.db_path):
            os.remove(cls.db_path)

    def setUp(self):
        with self.app.app_context():
            self.db.drop_all()

    def _table_names(self):
        with self.app.app_context():
            return set(inspect(self.db.engine).get_table_names())

    def test_initialize_schema_creates_both_tables(self):
        self.assertEqual(self._table_names(), set())

        with self.app.app_context():
            self.setup_service.initialize_schema()

        self.assertEqual(self._table_names(), {"blogs", "comments"})

    def test_comments_foreign_key_cascades(self):
        with self.app.app_context():
            self.setup_service.initialize_schema()
            foreign_keys = inspect(self.db.engine).get_foreign_keys("comments")

        self.assertEqual(len(foreign_keys), 1)
        self.assertEqual(foreign_keys[0]["referred_table"], "blogs")
        self.assertEqual(foreign_keys[0]["constrained_columns"], ["blog_id"])
        self.assertEqual(foreign_keys[0]["options"].get("ondelete"), "CASCADE")

    def test_deleting_blog_removes_its_comments(self):
        with self.app.app_context():
            self.setup_service.initialize_schema()

            kept = self.Blog(title="kept", content="x")
            doomed = self.Blog(title="doomed", content="x")
            self.db.session.add_all([kept, doomed])
            self.db.session.flush()
            self.db.session.add_all([
                self.Comment(blog_id=doomed.id, author="ann", content="bye"),
                self.Comment(blog_id=doomed.id, author="bob", content="bye"),
                self.Comment(blog_id=kept.id, author="eve", content="stay"),
            ])
            self.db.session.commit()

            self.db.session.execute(
                delete(self.Blog).where(self.Blog.id == doomed.id)
            )
            self.db.session.commit()

            remaining = self.db.session.query(self.Comment).all()

            self.assertEqual([c.author for c in remaining], ["eve"])

    def test_comment_for_unknown_blog_violates_foreign_key(self):
        with self.app.app_context():
            self.setup_service.initialize_schema()

            self.db.session.add(self.Comment(blog_id=123, author="ann", content="x"))
            with self.assertRaises(IntegrityError):
                self.db.session.commit()
            self.db.session.rollback()

    def test_init_db_command(self):
        runner = self.app.test_cli_runner()

        result = runner.invoke(args=["init-db"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Database tables created successfully", result.output)
        self.assertEqual(self._table_names(), {"blogs", "comments"})

        again = runner.invoke(args=["init-db"])
        self.assertEqual(again.exit_code, 0, again.output)


class TestAutoCreate(unittest.TestCase):
    def test_create_app_can_create_tables_on_start(self):
        db_fd, db_path = tempfile.mkstemp(suffix=".db")
        os.close(db_fd)

        from app import create_app
        from app.db import db

        try:
            app = create_app({
                "TESTING": True,
                "SQLALCHEMY_DATABASE_URI": f"sqlite:///{db_path}",
                "DB_AUTO_CREATE": True,
            })
            with app.app_context():
                tables = set(inspect(db.engine).get_table_names())
                db.engine.dispose()
            self.assertEqual(tables, {"blogs", "comments"})
        finally:
            os.remove(db_path)


if __name__ == "__main__":
    unittest.main()
