"""Tests for error conditions and configuration validation."""

import logging
import unittest

from nodepathlib import (
    ALL_CHILDREN,
    EMPTY,
    ConfigurationError,
    ElementPath,
    MemoryNode,
    MissingStepError,
    PathConfig,
    PathError,
    TraceConfig,
    name_is,
)


class TestMissingSteps(unittest.TestCase):
    """A None step is a contract violation reported at navigation time."""

    def setUp(self):
        self.root = MemoryNode("root", MemoryNode("a"), MemoryNode("b"))

    def test_none_step_fails_with_position(self):
        path = ElementPath(ALL_CHILDREN, None, name_is("a"))

        with self.assertRaises(MissingStepError) as ctx:
            path.navigate(self.root)

        self.assertEqual(ctx.exception.index, 1)
        self.assertIn("[1]", str(ctx.exception))

    def test_missing_step_is_type_error(self):
        with self.assertRaises(TypeError):
            ElementPath(None).navigate(self.root)

    def test_missing_step_is_path_error(self):
        with self.assertRaises(PathError):
            ElementPath(None).navigate(self.root)

    def test_none_step_not_reached_after_empty_frontier(self):
        path = ElementPath(name_is("zzz"), None)

        self.assertIs(path.navigate(self.root), EMPTY)

    def test_none_step_not_reached_with_empty_start(self):
        self.assertIs(ElementPath(None).navigate_all([]), EMPTY)

    def test_non_callable_step_rejected_at_construction(self):
        with self.assertRaises(TypeError):
            ElementPath("children")


class TestHostErrorsPropagate(unittest.TestCase):

    def test_predicate_exception_is_not_wrapped(self):
        def broken(node):
            raise KeyError("host")

        with self.assertRaises(KeyError):
            ElementPath(broken).navigate(MemoryNode("root"))


class TestConfigValidation(unittest.TestCase):

    def test_default_config_is_valid(self):
        self.assertEqual(PathConfig().validate(), [])

    def test_reports_every_problem(self):
        config = PathConfig(
            trace=TraceConfig(logger_name="", level=-1, sink="not callable"),
            adapter=object(),
        )

        errors = config.validate()

        self.assertEqual(len(errors), 5)
        self.assertIn("trace.logger_name cannot be empty", errors)
        self.assertIn("adapter is missing get_children()", errors)

    def test_invalid_config_rejected_by_navigate(self):
        config = PathConfig(trace=TraceConfig(level=-5))

        with self.assertRaises(ConfigurationError) as ctx:
            ElementPath(ALL_CHILDREN).navigate(MemoryNode("root"), config=config)

        self.assertIn("trace.level", str(ctx.exception))

    def test_configuration_error_is_value_error(self):
        self.assertTrue(issubclass(ConfigurationError, ValueError))

    def test_with_sink_keeps_other_settings(self):
        lines = []
        base = PathConfig(trace=TraceConfig(logger_name="custom", level=logging.DEBUG))

        config = base.with_sink(lines.append)

        self.assertEqual(config.trace.logger_name, "custom")
        self.assertEqual(config.trace.level, logging.DEBUG)
        self.assertIs(config.trace.resolve_sink(), config.trace.sink)


class TestMemoryNode(unittest.TestCase):

    def test_child_cannot_have_two_parents(self):
        child = MemoryNode("child")
        MemoryNode("first", child)

        with self.assertRaises(ValueError):
            MemoryNode("second", child)

    def test_generated_ids_are_unique(self):
        self.assertNotEqual(MemoryNode("a"), MemoryNode("a"))

    def test_find_and_walk(self):
        x = MemoryNode("x")
        root = MemoryNode("root", MemoryNode("a", x))

        self.assertIs(root.find("x"), x)
        self.assertIsNone(root.find("zzz"))
        self.assertEqual([n.name for n in root.walk()], ["root", "a", "x"])


if __name__ == "__main__":
    unittest.main()
