"""Tests for ContextVar-based configuration.

Validates defaults, thread isolation, and context manager behavior.
"""

from threading import Thread

import pytest

from rant import (
    RantConfig,
    TemplateSyntaxError,
    config_context,
    get_config,
    lex,
    parse,
    reset_config,
    run,
    set_config,
)
from rant.config import MAX_DEPTH_CEILING


class TestRantConfigDataclass:
    """Test RantConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = RantConfig()
        assert config.max_depth == 64
        assert config.seed is None

    def test_immutability(self) -> None:
        config = RantConfig()
        with pytest.raises(AttributeError):
            config.seed = 1  # type: ignore[misc]

    def test_max_depth_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="max_depth"):
            RantConfig(max_depth=0)

    def test_max_depth_above_ceiling_rejected(self) -> None:
        with pytest.raises(ValueError, match=f"between 1 and {MAX_DEPTH_CEILING}"):
            RantConfig(max_depth=MAX_DEPTH_CEILING + 1)

    def test_huge_max_depth_rejected(self) -> None:
        with pytest.raises(ValueError):
            RantConfig(max_depth=5000)

    def test_from_dict_validates(self) -> None:
        with pytest.raises(ValueError):
            RantConfig.from_dict({"max_depth": 10_000})


class TestDepthCeiling:
    """Templates nested up to the ceiling parse and run; one deeper is a syntax error."""

    def test_nesting_at_ceiling_parses(self) -> None:
        source = "{" * MAX_DEPTH_CEILING + "a" + "}" * MAX_DEPTH_CEILING
        with config_context(RantConfig(max_depth=MAX_DEPTH_CEILING)):
            tree = parse(lex(source))
        assert run(tree) == "a"

    def test_nesting_past_ceiling_is_syntax_error(self) -> None:
        depth = MAX_DEPTH_CEILING + 1
        source = "{" * depth + "a" + "}" * depth
        with config_context(RantConfig(max_depth=MAX_DEPTH_CEILING)):
            with pytest.raises(TemplateSyntaxError, match="nested deeper"):
                parse(lex(source))

    def test_very_deep_template_is_syntax_error(self) -> None:
        source = "{" * 2000 + "a" + "}" * 2000
        with config_context(RantConfig(max_depth=MAX_DEPTH_CEILING)):
            with pytest.raises(TemplateSyntaxError):
                parse(lex(source))


class TestFromDict:
    def test_known_keys(self) -> None:
        config = RantConfig.from_dict({"max_depth": 8, "seed": 3})
        assert config == RantConfig(max_depth=8, seed=3)

    def test_unknown_keys_ignored(self) -> None:
        config = RantConfig.from_dict({"seed": 7, "unknown_key": "ignored"})
        assert config.seed == 7
        assert config.max_depth == 64

    def test_empty_dict(self) -> None:
        assert RantConfig.from_dict({}) == RantConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        """Reset config after each test."""
        reset_config()

    def test_default_config(self) -> None:
        assert get_config() == RantConfig()

    def test_set_and_get(self) -> None:
        set_config(RantConfig(seed=5))
        assert get_config().seed == 5

    def test_reset_restores_default(self) -> None:
        set_config(RantConfig(max_depth=3))
        reset_config()
        assert get_config().max_depth == 64


class TestConfigContext:
    """Test config_context context manager."""

    def test_context_sets_config(self) -> None:
        with config_context(RantConfig(seed=1)):
            assert get_config().seed == 1
        assert get_config().seed is None

    def test_nested_contexts(self) -> None:
        with config_context(RantConfig(seed=1)):
            with config_context(RantConfig(max_depth=2)):
                assert get_config().max_depth == 2
                assert get_config().seed is None
            assert get_config().seed == 1
            assert get_config().max_depth == 64

    def test_context_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with config_context(RantConfig(seed=9)):
                raise RuntimeError("boom")
        assert get_config().seed is None


class TestThreadIsolation:
    def test_thread_config_does_not_leak(self) -> None:
        seen: list[int | None] = []

        def worker() -> None:
            set_config(RantConfig(seed=11))
            seen.append(get_config().seed)

        thread = Thread(target=worker)
        thread.start()
        thread.join(timeout=5.0)

        assert seen == [11]
        assert get_config().seed is None
