"""Tests for the public package surface."""

import snakecase


class TestPublicApi:
    def test_version(self) -> None:
        assert snakecase.__version__ == "0.1.0"

    def test_all_exports_resolve(self) -> None:
        for name in snakecase.__all__:
            assert hasattr(snakecase, name), name

    def test_top_level_usage(self) -> None:
        sc = snakecase.SnakeCase("hello_world")
        assert sc.as_ref() == snakecase.SnakeCaseRef("hello_world")
        assert snakecase.is_snake_case(sc.as_str())
