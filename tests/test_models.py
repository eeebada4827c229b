from sqlalchemy import inspect

from hotel_search.db.base import create_schema
from hotel_search.db.session import make_engine

WP_TABLES = ["wp_postmeta", "wp_posts", "wp_usermeta", "wp_users"]


def test_create_schema_builds_the_wp_tables(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'schema.db'}")
    try:
        assert create_schema(engine) == WP_TABLES
        assert sorted(inspect(engine).get_table_names()) == WP_TABLES
        columns = {c["name"] for c in inspect(engine).get_columns("wp_postmeta")}
        assert {"meta_id", "post_id", "meta_key", "meta_value"} <= columns
    finally:
        engine.dispose()


def test_create_schema_is_repeatable(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'schema.db'}")
    try:
        create_schema(engine)
        assert create_schema(engine) == WP_TABLES
    finally:
        engine.dispose()
